"""Initialize the data file with an empty document."""
import sys
from pathlib import Path

# Add the project root to the Python path
sys.path.append(str(Path(__file__).parent))

from src.config import settings
from src.database import RecordStore


def main():
    """Create the data file if it does not exist yet."""
    print("Initializing data file...")

    store = RecordStore(settings.DATA_FILE)
    if store.ensure_initialized():
        print(f"Data file created at {store.path}")
    else:
        document = store.load()
        print(f"Data file already exists at {store.path} "
              f"({len(document.employees)} employees, {len(document.payrolls)} payroll entries)")


if __name__ == "__main__":
    main()
