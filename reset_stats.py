"""
Reset all focus timer stats by deleting the stored session history.
"""

from BackEnd.core.paths import db_path
from BackEnd.repos.kv_store import KeyValueStore
from BackEnd.repos.session_repo import SessionStore

def reset_all_stats(ask=input):
    """Delete all session history after confirmation. Returns True if history was cleared."""
    db_file = db_path()
    if not db_file.exists():
        print("No database found. Stats are already at 0.")
        return False

    kv = KeyValueStore(db_file)
    try:
        store = SessionStore(kv)
        print(f"Found {len(store)} recorded sessions in: {db_file}")

        # Ask for confirmation
        confirm = ask("Are you sure you want to delete all study history? This cannot be undone. (yes/no): ")
        if confirm.strip().lower() not in ['yes', 'y']:
            print("Reset cancelled.")
            return False
        store.clear()
        print("✓ All stats have been reset to 0")
        return True
    finally:
        kv.close()

if __name__ == "__main__":
    print("=" * 50)
    print("Focus Timer - Reset All Stats")
    print("=" * 50)
    reset_all_stats()
