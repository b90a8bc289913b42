"""Address normalization. The normalized form is the only key for subscriptions and history."""


def normalize_address(address: str | None) -> str:
    """Canonical lowercase form. Addresses differing only in case are the same account."""
    if address is None:
        return ""
    return address.lower()
