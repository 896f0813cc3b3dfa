"""Runtime settings, read from the environment (and a ``.env`` file)."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from .designs import RequirementOrder
from .result import Err, Ok, Result

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    requirement_order: RequirementOrder = RequirementOrder.RECORD

    @classmethod
    def from_env(cls) -> Result[Settings, ValueError]:
        """Load FLORIST_LOG_LEVEL and FLORIST_REQUIREMENT_ORDER.

        Values already in the environment take precedence over a ``.env``
        file found from the working directory upward.
        """
        load_dotenv(find_dotenv(usecwd=True))
        level = os.getenv("FLORIST_LOG_LEVEL", cls.log_level).strip().upper()
        order = os.getenv(
            "FLORIST_REQUIREMENT_ORDER", cls.requirement_order.value
        ).strip().lower()

        if level not in LOG_LEVELS:
            return Err(
                ValueError(
                    f"FLORIST_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {level!r}"
                )
            )
        match order:
            case "record" | "sorted":
                return Ok(cls(log_level=level, requirement_order=RequirementOrder(order)))
            case _:
                return Err(
                    ValueError(
                        f"FLORIST_REQUIREMENT_ORDER must be 'record' or 'sorted', got {order!r}"
                    )
                )
