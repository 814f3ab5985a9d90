"""Operator-wide settings given on the command line."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_DNS_DOMAIN_SUFFIX = "cluster.local"


@dataclass
class OperatorConfig:
    """Settings that shape the names of generated resources."""

    dns_domain_suffix: str = DEFAULT_DNS_DOMAIN_SUFFIX
    volume_name_with_hash: bool = True

    def service_domain_suffix(self) -> str:
        """Return the DNS suffix shared by every service, e.g. ``svc.cluster.local``."""
        return f"svc.{self.dns_domain_suffix}"