#!/usr/bin/env python
"""
Example script showing the diagnostics produced for a few request payloads.
"""
import json

from apiguard.utils.validate_request import validate_request


EXAMPLES = [
    (
        "Upload with a one day expiration",
        "file",
        {"purpose": "assistants", "expires_after": {"anchor": "created_at", "seconds": 86400}},
    ),
    (
        "Upload with a mistyped purpose",
        "file",
        {"purpose": "finetune", "file_type": "train.jsonl"},
    ),
    (
        "Batch upload of a plain JSON file",
        "file",
        {"purpose": "batch", "file_type": "requests.json"},
    ),
    (
        "Text response with an empty vector store list",
        "text_response",
        {
            "input": "What is our refund policy?",
            "tools": [{"type": "file_search", "vector_store_ids": []}],
        },
    ),
]


def main():
    """Run the validation examples."""
    for title, kind, payload in EXAMPLES:
        print(title)
        print(json.dumps(payload, indent=2))

        result = validate_request(kind, payload)
        if result.valid:
            print("✅ Valid request")
        else:
            for diagnostic in result.diagnostics:
                print(f"❌ {diagnostic.field} [{diagnostic.category}]")
                print(f"   {diagnostic.message}")
                if diagnostic.suggestion:
                    print(f"   Suggestion: {diagnostic.suggestion}")

        print("\n" + "-" * 50 + "\n")


if __name__ == "__main__":
    main()
