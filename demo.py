from magsell import init_database, UserService, DEFAULT_ADMIN_USERNAME, DEFAULT_ADMIN_PASSWORD
from magsell.utils.logger import setup_logging
import tempfile

setup_logging()

print("--- MagSell Database Demo ---")

with tempfile.TemporaryDirectory() as home:
    # 1. Initialize database (creates <home>/.magsell/magsell.db)
    db = init_database(home)
    print(f"[+] Database initialized at {db.target}")

    # 2. Default admin was seeded during initialization
    users = UserService(db)
    ok = users.authenticate(DEFAULT_ADMIN_USERNAME, DEFAULT_ADMIN_PASSWORD)
    print(f"[+] Default admin login: {'OK' if ok else 'FAILED'}")

    # 3. Each operation opens its own connection
    with db.connection() as conn:
        conn.execute(
            "INSERT INTO products (name, price, quantity, category) VALUES (?, ?, ?, ?)",
            ("Croissant", 4.50, 24, "pastry"),
        )
    print("[+] Added product: Croissant")

    # 4. Health check
    health = db.health_check()
    print(f"[+] Status: {health['status']}")
    for table, count in health['tables'].items():
        print(f"    - {table}: {count} rows")

    db.shutdown()

print("--- Demo Complete ---")
