#!/usr/bin/env python
from sdk.client import CatalogClient
from sdk.logging_config import setup_logging
from sdk.models import Success


def main():
    setup_logging()
    c = CatalogClient()

    # -----------------------------
    # Server health
    # -----------------------------
    print("Checking server health...")
    try:
        print(c.health())
    except Exception as e:
        print(f"Health check failed: {e}")

    # -----------------------------
    # List products
    # -----------------------------
    print("\nListing products...")
    result = c.list_products()
    if isinstance(result, Success):
        for p in result.items:
            print(f"  #{p.id} {p.name:<15} ${p.price:>9} stock={p.stock:<4} [{p.category.name}]")
        print(f"{len(result.items)} shown, {result.count} reported, {result.skipped} skipped")
    else:
        print(f"Failed ({result.kind.value}): {result.user_message}")
        print(f"  detail: {result.message}")

        # -----------------------------
        # One manual retry
        # -----------------------------
        print("\nRetrying once...")
        retry = c.list_products()
        print("ok" if retry.ok else f"still failing: {retry.user_message}")


if __name__ == "__main__":
    main()
