#!/usr/bin/env python3
"""
Example usage of SafeJson.

This script demonstrates null-safe navigation, typed getters and
mutation through SafeNode.
"""

import json

from safejson import SafeJsonConfig, SafeNode


def main():
    """Main example function."""
    print("SafeJson Example")
    print("=" * 50)

    sample_data = {
        "order_id": "A-1042",
        "placed_at": "2024-07-15T10:30:00Z",
        "customer": {
            "name": "Alice Johnson",
            "email": "alice@example.com",
            "vip": "TRUE",
            "phone": None
        },
        "items": [
            {"sku": "BK-001", "qty": 2, "price": 12.50},
            {"sku": "BK-002", "qty": "1", "price": "8.99"}
        ],
        "notes": {}
    }
    root = SafeNode.parse(json.dumps(sample_data))

    print(f"📄 Root is an object: {root.is_json_object()}")
    print(f"🆔 Order: {root.get('order_id').get_string()}")
    print(f"🕒 Placed at: {root.get('placed_at').get_date()}")
    print(f"👤 Customer: {root.get('customer').get('name').get_string()}")
    print(f"⭐ VIP (from text): {root.get('customer').get('vip').get_boolean()}")

    # Present null versus missing key
    phone = root.get("customer").get("phone")
    fax = root.get("customer").get("fax")
    print(f"📞 phone is_null={phone.is_null()} exists={phone.exists()}")
    print(f"📠 fax   is_null={fax.is_null()} exists={fax.exists()}")

    # Typed getters convert where the value allows it
    items = root.get("items")
    for i in range(items.size()):
        item = items.get(i)
        print(f"   • {item.get('sku').get_string()}: "
              f"{item.get('qty').get_integer()} x {item.get('price').get_big_decimal()}")

    # Long chains through missing data never raise
    deep = root.get("shipping").get("address").get("lines", 3).get("text")
    print(f"🔍 Missing chain: {deep!r} -> {deep.get_string()}")

    print("\n--- Modifying ---")
    root.get("notes").put("gift", True)
    root.get("items").add(SafeNode.empty_object().put("sku", "BK-003").put("qty", 1))
    root.get("items").put_at(10, "ignored")  # out of range, no effect
    root.get("order_id").put("not", "an object")  # no effect on strings
    print(root.to_json_string(2))

    exact = SafeNode.parse('{"total": 21.49}', SafeJsonConfig(parse_decimal=True))
    print(f"\n💰 Exact total: {exact.get('total').get_big_decimal()!r}")


if __name__ == "__main__":
    main()
