"""
Runtime configuration for QuickBooks services.

Each service receives its own ``QboConfig`` at construction instead of
reading process-wide flags, so two services with different settings can
be used side by side.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(environ: Mapping[str, str], name: str, default: bool) -> bool:
    raw = environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in TRUTHY


@dataclass(frozen=True)
class QboConfig:
    sandbox: bool = False
    log: bool = False
    log_xml_pretty_print: bool = True

    @property
    def environment(self) -> str:
        """Environment name as intuitlib expects it."""
        return "sandbox" if self.sandbox else "production"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "QboConfig":
        """
        Build a config from QBO_SANDBOX, QBO_LOG and QBO_LOG_XML_PRETTY_PRINT.

        Unset or blank variables keep the dataclass defaults.
        """
        env = os.environ if environ is None else environ
        return cls(
            sandbox=_env_flag(env, "QBO_SANDBOX", cls.sandbox),
            log=_env_flag(env, "QBO_LOG", cls.log),
            log_xml_pretty_print=_env_flag(
                env, "QBO_LOG_XML_PRETTY_PRINT", cls.log_xml_pretty_print
            ),
        )
