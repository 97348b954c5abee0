"""
Data reset script for Payroll Keeper.
This script overwrites the data file with an empty document.
"""
import argparse
import sys
from pathlib import Path

# Add the project root to the Python path
project_root = str(Path(__file__).parent.absolute())
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from src.config import settings
from src.database import RecordStore
from src.models import Document


def reset_database(confirm: bool = False) -> bool:
    """Replace all employees and payroll entries with an empty document."""
    if not confirm:
        print("⚠️  Refusing to reset without --yes. No changes were made.")
        return False

    store = RecordStore(settings.DATA_FILE)
    print(f"🔧 Resetting {store.path}...")
    store.save(Document())
    print("✅ Data file reset successfully!")
    return True


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--yes", action="store_true", help="confirm that all records should be deleted")
    args = parser.parse_args()
    sys.exit(0 if reset_database(confirm=args.yes) else 1)
