r"""Step-level retry eligibility.

This module provides the RetryDecider class that decides whether a step
may be wrapped in retry logic at all. It only looks at the step's
configuration, never at errors: error classification belongs to the
matchers.
"""

from __future__ import annotations

__all__ = ["RetryDecider"]

import logging
from collections.abc import Mapping
from typing import Any

logger: logging.Logger = logging.getLogger(__name__)


class RetryDecider:
    """Decides whether a step is eligible for retries.

    Steps are retryable by default. A step opts out with ``retry: false``,
    or by declaring ``idempotent: false`` since re-running a
    non-idempotent operation can duplicate its side effects.

    Example:
        ```pycon
        >>> from stepwise.retry import RetryDecider
        >>> decider = RetryDecider()
        >>> decider.should_retry_step({})
        True
        >>> decider.should_retry_step(None)
        True
        >>> decider.should_retry_step({"retry": False})
        False
        >>> decider.should_retry_step({"idempotent": False})
        False

        ```
    """

    def should_retry_step(self, step_config: Any) -> bool:
        """Indicate whether the step may be retried.

        Args:
            step_config: The step configuration. Anything other than a
                mapping carries no retry metadata.

        Returns:
            ``False`` if the step disables retries, otherwise ``True``.
        """
        if not isinstance(step_config, Mapping):
            return True
        if step_config.get("retry", None) is False:
            logger.debug("Retries disabled for step (retry: false)")
            return False
        if step_config.get("idempotent", None) is False:
            logger.debug("Retries disabled for non-idempotent step")
            return False
        return True
