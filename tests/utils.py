"""Helpers shared by test modules."""

MAIN_HOST = "shop.test"


def tenant_host(subdomain: str) -> str:
    return f"{subdomain}.{MAIN_HOST}"
