"""
Smoke test against a running EpicurAIn server:
- Health
- Rejected request (no equipment) returns null
- Full generation with the common pantry

Requires:
  pip install requests

Default base_url: http://127.0.0.1:8076
"""
import argparse
import json
from typing import Any, Dict

import requests


def _pp(title: str, obj: Any):
    print(f"\n===== {title} =====")
    print(json.dumps(obj, indent=2, ensure_ascii=False))


def _post(base_url: str, path: str, payload: Dict[str, Any], timeout: int = 120) -> requests.Response:
    url = f"{base_url.rstrip('/')}{path}"
    return requests.post(url, json=payload, timeout=timeout)


def _get(base_url: str, path: str, timeout: int = 30) -> requests.Response:
    url = f"{base_url.rstrip('/')}{path}"
    return requests.get(url, timeout=timeout)


def check_health(base_url: str):
    r = _get(base_url, "/health")
    _pp("Health", {"status_code": r.status_code, "response": r.json()})


def check_rejected(base_url: str):
    r = _post(base_url, "/v1/recipes/generate", {
        "ingredientsList": "Salt, Pepper",
        "equipmentList": "",
        "numAdults": "2",
    })
    _pp("Rejected (no equipment)", {"status_code": r.status_code, "response": r.json()})


def check_generate(base_url: str, ingredients: str, equipment: str, adults: int, children: int, meal: str):
    r = _post(base_url, "/v1/recipes/generate", {
        "ingredientsList": ingredients,
        "equipmentList": equipment,
        "numAdults": adults,
        "numChildren": children,
        "mealName": meal,
    })
    body = r.json()
    print(f"\n===== Generate ({r.status_code}) =====")
    print(body["generatedOutput"] if body else "<no result>")


def main():
    parser = argparse.ArgumentParser(description="EpicurAIn smoke test")
    parser.add_argument("--base-url", default="http://127.0.0.1:8076", help="API base URL")
    parser.add_argument("--ingredients", default="Chicken thighs, Salt, Pepper, Olive oil, Garlic, Lemons")
    parser.add_argument("--equipment", default="Stove top, Oven")
    parser.add_argument("--adults", type=int, default=2)
    parser.add_argument("--children", type=int, default=0)
    parser.add_argument("--meal", default="dinner")
    args = parser.parse_args()

    check_health(args.base_url)
    check_rejected(args.base_url)
    check_generate(args.base_url, args.ingredients, args.equipment, args.adults, args.children, args.meal)


if __name__ == "__main__":
    main()
