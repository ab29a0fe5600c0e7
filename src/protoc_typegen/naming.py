from __future__ import annotations


def package_prefix(package: str) -> str:
    """Prefix a package contributes to a concatenated type name (``foo.bar`` -> ``foobar``)."""
    return package.replace(".", "")


def qualify_name(full_name: str, package: str, always_qualify: bool = False) -> str:
    """Derive a public type name from a fully-qualified proto name.

    All dots are removed, so ``.shop.Order.Item`` becomes ``shopOrderItem``.
    Unless ``always_qualify`` is set, the owner package is stripped first,
    leaving ``OrderItem``. Only whole leading package segments are stripped,
    so qualifying an already local name returns it unchanged.
    """
    name = full_name.replace(".", "")
    if not always_qualify and package and full_name.lstrip(".").startswith(package + "."):
        name = name[len(package_prefix(package)):]
    return name
