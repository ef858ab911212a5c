"""
Reset the local study store.

DANGEROUS: This deletes local edits!
Without --dataset every stored collection and the active selector are
dropped; with --dataset only that collection is, and it is re-seeded from
its seed document on the next app start.

Usage:
    python -m scripts.maintenance.reset_store [--dataset general|daily]
"""

from __future__ import annotations

import argparse

from core import storage
from core.schemas import DatasetSelector


def main():
    parser = argparse.ArgumentParser(description="Reset the local study store")
    parser.add_argument(
        "--dataset",
        choices=[selector.value for selector in DatasetSelector],
        help="Only reset this dataset's stored items"
    )
    args = parser.parse_args()

    print("=" * 60)
    print("WARNING: Reset Study Store")
    print("=" * 60)
    print()
    if args.dataset:
        label = DatasetSelector(args.dataset).label
        print(f"This will DELETE all local edits to {label}.")
    else:
        print("This will DELETE:")
        print("  - All stored item collections (every local edit)")
        print("  - The remembered active dataset")
    print()

    response = input("Are you sure you want to reset? (type 'yes' to confirm): ")

    if response.lower() != "yes":
        print("\nCancelled. No changes made.")
        return

    print("\nResetting store...")
    if args.dataset:
        storage.KeyValueStore(storage.get_engine()).reset_items(DatasetSelector(args.dataset))
    else:
        storage.reset_db()
    print("✓ Store reset complete!")
    print("\nSeed documents will be loaded again on the next start.")


if __name__ == "__main__":
    main()
