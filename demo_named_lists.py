"""
Demo: Pair up two versions of a list by identity instead of position.
"""

from structident.conversion import from_decoded
from structident.named_list import (
    find_by_identifier,
    names_of_named_list,
    resolve_identifier,
    split_name_and_data,
)
from structident.path import list_paths


BEFORE = from_decoded([
    {"name": "nginx", "image": "nginx:1.25", "replicas": 2},
    {"name": "redis", "image": "redis:7"},
    {"name": "worker", "image": "app:3.1"},
])

AFTER = from_decoded([
    {"name": "redis", "image": "redis:7"},
    {"name": "nginx", "image": "nginx:1.27", "replicas": 2},
    {"name": "cron", "image": "app:3.1"},
])


def main():
    identifier = resolve_identifier(BEFORE)
    if not identifier or resolve_identifier(AFTER) != identifier:
        print("No common identifier, the lists have to be compared by index.")
        return

    print(f"Identifier field: {identifier}")
    print()

    before_names = names_of_named_list(BEFORE, identifier)
    after_names = names_of_named_list(AFTER, identifier)

    for name in before_names:
        if name not in after_names:
            print(f"  - removed: {name}")
    for name in after_names:
        if name not in before_names:
            print(f"  + added:   {name}")

    for entry in BEFORE:
        name, data = split_name_and_data(entry, identifier)
        other, found = find_by_identifier(AFTER, identifier, name)
        if not found:
            continue

        _, other_data = split_name_and_data(other, identifier)
        marker = "unchanged" if data == other_data else "changed"
        print(f"  ~ {name}: {marker}")

    print()
    print("Leaf paths of the new version:")
    for path in list_paths([AFTER]):
        print(f"  {path}")


if __name__ == "__main__":
    main()
