#!/usr/bin/env python
"""
Script to run database migrations before starting the server, then seed
the default roles and lead statuses.
"""
import os
import sys
import traceback

print("=" * 60)
print("DATABASE MIGRATION SCRIPT STARTING")
print("=" * 60)

if not os.getenv('DATABASE_URL'):
    print("ERROR: DATABASE_URL environment variable is not set!")
    sys.exit(1)

try:
    from flask_migrate import upgrade
    from jobbify import create_app
    from jobbify.seed import seed_reference_data

    app = create_app()
    with app.app_context():
        print("Running database migrations...")
        upgrade()
        print("✓ Migrations completed successfully!")

        created = seed_reference_data()
        print(f"✓ Seeded {created} reference rows")
except Exception as e:
    print(f"\n✗ Migration error: {e}")
    traceback.print_exc()
    sys.exit(1)

print("=" * 60)
print("MIGRATION SCRIPT COMPLETED SUCCESSFULLY")
print("=" * 60)
