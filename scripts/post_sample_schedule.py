#!/usr/bin/env python3
"""
Post a sample schedule entry to a running server.

Usage: python scripts/post_sample_schedule.py [base_url]
Default base_url: http://localhost:8080
"""
import sys

import httpx

SAMPLE_SCHEDULE = {
    "student_id": 123,
    "day": "2024-06-01",
    "start_time": "10:00:00",
    "end_time": "12:00:00",
    "state": "planned",
}


def main():
    base_url = sys.argv[1] if len(sys.argv) > 1 else "http://localhost:8080"

    try:
        response = httpx.post(f"{base_url}/schedule", json=SAMPLE_SCHEDULE, timeout=10.0)
    except httpx.HTTPError as e:
        print(f"HTTP request failed: {e}")
        sys.exit(1)

    print(f"HTTP status: {response.status_code}")
    print(response.text)


if __name__ == "__main__":
    main()
