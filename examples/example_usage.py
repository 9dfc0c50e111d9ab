"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; validation lives in the services.
"""

import importlib
import json

from config import get_settings_module

from attendance_qa.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings=settings)
    answer = {
        "naturalLanguageAnswer": "Bob Lee (S9) was absent on 2025-10-01.",
        "structuredData": {"students": [{"firstName": "Bob", "lastName": "Lee", "absences": ["2025-10-01"]}]},
    }
    print(json.dumps(container.review_service.review(answer), indent=2))


if __name__ == "__main__":
    main()
