# utils/keep_alive.py
import asyncio
import aiohttp
import os
from datetime import datetime

PING_INTERVAL_SECONDS = 600
PING_TIMEOUT_SECONDS = 30

# Held here so the running task is not garbage collected
keep_alive_task = None

async def ping_self(url: str, interval: int = PING_INTERVAL_SECONDS):
    """Ping /health so the hosting platform does not put the service to sleep"""
    timeout = aiohttp.ClientTimeout(total=PING_TIMEOUT_SECONDS)
    while True:
        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.get(f"{url.rstrip('/')}/health") as response:
                    if response.status == 200:
                        print(f"✅ Keep-alive ping successful at {datetime.now()}")
                    else:
                        print(f"⚠️ Keep-alive ping failed: {response.status}")
        except asyncio.TimeoutError:
            print(f"⏱️ Keep-alive ping timed out after {PING_TIMEOUT_SECONDS}s")
        except aiohttp.ClientError as e:
            print(f"❌ Keep-alive ping error: {e}")

        await asyncio.sleep(interval)

def start_keep_alive():
    """Start the keep-alive task when running on Render"""
    global keep_alive_task
    url = os.getenv("RENDER_EXTERNAL_URL")
    if not url:
        return None
    if keep_alive_task is None or keep_alive_task.done():
        keep_alive_task = asyncio.create_task(ping_self(url))
    return keep_alive_task
