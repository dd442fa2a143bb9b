import sys
import traceback

from mileage_tracker import load_settings
from mileage_tracker.transports import check_connection

# Usage: python check_connection.py [ENDPOINT_URL]
overrides = {"endpoint_url": sys.argv[1]} if len(sys.argv) > 1 else None
settings = load_settings(overrides)

print(f"Testing connection to: {settings.endpoint_url}")

try:
    report = check_connection(settings)
    if report is None:
        print("Endpoint unreachable.")
        sys.exit(1)

    print(f"Status: {report.status_code}")
    print(f"Body: {report.text[:500]}")
    sys.exit(0 if report.ok else 1)

except Exception:
    traceback.print_exc()
    sys.exit(1)
