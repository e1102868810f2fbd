"""
Seed script — submits a small print queue for demo purposes.

Usage:
    python -m scripts.seed_jobs
    python -m scripts.seed_jobs --base-url http://localhost:9000

This creates:
- the classic three-job example (10/2, 5/1, 20/3) where SJF and Priority agree
- a few extra jobs where they don't (a long faculty job, short guest jobs)

Then it asks the server to compare all three policies and prints the summary.
Run this after `uvicorn api.main:app` is up.
"""

import argparse

import httpx

BASE_URL = "http://localhost:8000"

JOBS = [
    {"size": 10, "priority": 2},
    {"size": 5, "priority": 1},
    {"size": 20, "priority": 3},
    {"size": 120, "priority": 1},   # faculty thesis draft
    {"size": 2, "priority": 3},     # guest boarding pass
    {"size": 8, "priority": 2},
]


def seed(base_url: str = BASE_URL):
    client = httpx.Client(base_url=base_url, timeout=10.0)

    print(f"Submitting {len(JOBS)} print jobs to {base_url}...\n")

    for job in JOBS:
        resp = client.post("/jobs/", json=job)
        resp.raise_for_status()
        data = resp.json()
        print(f"  Job {data['id']}: {data['size']} pages, priority {data['priority']}")

    resp = client.get("/simulations/compare")
    resp.raise_for_status()
    comparison = resp.json()

    print("\n{:<34} {:>10} {:>16}".format("Policy", "Avg Wait", "Avg Turnaround"))
    print("-" * 62)
    for result in comparison["results"].values():
        print("{:<34} {:>10.2f} {:>16.2f}".format(
            result["policy_name"], result["avg_wait_time"], result["avg_turnaround_time"]
        ))

    print(f"\nLowest average wait: {comparison['best_avg_wait']}")
    print(f"Run one policy:  curl {base_url}/simulations/sjf")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed the print spooler with demo jobs")
    parser.add_argument("--base-url", type=str, default=BASE_URL)
    seed(parser.parse_args().base_url)
