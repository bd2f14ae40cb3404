#!/usr/bin/env python3
"""Walk a product through create, update, fetch and delete."""

import orjson

from shoper_api.clients import ShoperClient, is_failure
from shoper_api.settings import get_settings


def show(label: str, payload: object) -> None:
    if is_failure(payload):
        print(f"{label}: {payload}")
        return
    print(f"{label}:")
    print(orjson.dumps(payload, option=orjson.OPT_INDENT_2).decode("utf-8"))


def main(category_id: int, code: str, name: str) -> None:
    client = ShoperClient.from_settings(get_settings())
    product = {
        "category_id": category_id,
        "code": code,
        "pkwiu": "",
        "stock": {"price": 9.99},
        "translations": {
            "pl_PL": {"active": 1, "name": name, "short_description": "Short Description"},
        },
    }
    product_id = client.post("products", product)
    show("POST products", product_id)
    if is_failure(product_id):
        client.close()
        return

    show("PUT products", client.put(f"products/{product_id}", {"stock": {"price": 19.99}}))
    show("GET products", client.get(f"products/{product_id}"))
    show("DELETE products", client.delete(f"products/{product_id}"))
    client.close()


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Create, update, fetch and delete a sample product.")
    parser.add_argument("--category-id", type=int, default=5, help="Category for the sample product")
    parser.add_argument("--code", default="Code", help="Product code")
    parser.add_argument("--name", default="Product Name", help="Polish product name")
    args = parser.parse_args()
    main(args.category_id, args.code, args.name)
