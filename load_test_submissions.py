"""
Load test for the scoreboard
Simulates many judges submitting route results at once, including
deliberate duplicates so the one-result-per-pair guard gets exercised.
"""

import asyncio
import random
import time
from collections import Counter

import aiohttp

# -----------------------------
# CONFIG - ADJUST IF NEEDED
# -----------------------------
BASE_URL = "http://127.0.0.1:3000"

NUM_CLIMBERS = 200
ROUTES = ["Route 1", "Route 2", "Route 3", "Route 4", "Route 5", "Route 6"]

# Total POST requests to send
TOTAL_REQUESTS = 2000

# How many run simultaneously
MAX_CONCURRENT = 100


def random_attempts():
    """A plausible attempt list: bonus at some point, maybe a top after it."""
    count = random.randint(1, 6)
    bonus_at = random.randint(1, count) if random.random() < 0.8 else None
    top_at = None
    if bonus_at is not None and random.random() < 0.6:
        top_at = random.randint(bonus_at, count)
        # top on the bonus attempt itself is rejected by default rules
        if top_at == bonus_at:
            top_at = None if bonus_at == count else bonus_at + 1

    return [
        {"number": n, "bonus": n == bonus_at, "top": n == top_at}
        for n in range(1, count + 1)
    ]


# -----------------------------
# Load test functions
# -----------------------------
async def submit_result(session, climber, route, stats):
    payload = {
        "climber": climber,
        "route": route,
        "attempts": random_attempts(),
    }

    try:
        async with session.post(f"{BASE_URL}/submit", json=payload) as resp:
            text = await resp.text()
            stats[resp.status] += 1
            if resp.status >= 500:
                print(f"[ERROR {resp.status}] {payload} :: {text[:200]}")
            return resp.status
    except aiohttp.ClientError as e:
        stats["exception"] += 1
        print(f"[EXCEPTION] {e} :: {payload}")
        return None


async def worker(name, session, task_queue, stats):
    while True:
        item = await task_queue.get()
        if item is None:
            task_queue.task_done()
            break

        climber, route = item
        await submit_result(session, climber, route, stats)
        task_queue.task_done()


async def main():
    task_queue = asyncio.Queue()
    stats = Counter()

    for _ in range(TOTAL_REQUESTS):
        climber = f"Test Climber {random.randint(1, NUM_CLIMBERS)}"
        route = random.choice(ROUTES)
        await task_queue.put((climber, route))

    # Add sentinel None tasks to close workers
    for _ in range(MAX_CONCURRENT):
        await task_queue.put(None)

    async with aiohttp.ClientSession() as session:
        workers = [
            asyncio.create_task(worker(f"worker-{i}", session, task_queue, stats))
            for i in range(MAX_CONCURRENT)
        ]

        print(f"Sending {TOTAL_REQUESTS} requests with concurrency {MAX_CONCURRENT}...")
        start = time.time()

        await task_queue.join()
        end = time.time()

        for w in workers:
            await w

        async with session.get(f"{BASE_URL}/submitted.json") as resp:
            pairs = await resp.json()

    print(f"Completed in {end - start:.2f} seconds")
    print(f"Status counts: {dict(stats)}")

    unique = {(p["climber"], p["route"]) for p in pairs}
    print(f"Stored results: {len(pairs)} ({len(unique)} unique pairs)")
    if len(unique) != len(pairs):
        print("[WARNING] duplicate (climber, route) rows found in the store")


if __name__ == "__main__":
    asyncio.run(main())
