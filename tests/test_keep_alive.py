import asyncio
import os
import sys
import unittest
from unittest import mock

sys.path.append(os.path.dirname(os.path.dirname(__file__)))
from utils import keep_alive
from utils.keep_alive import ping_self, start_keep_alive


class TimingOutRequest:
    def __init__(self, session: "FakeSession") -> None:
        self.session = session

    async def __aenter__(self):
        self.session.pings += 1
        raise asyncio.TimeoutError()

    async def __aexit__(self, *exc_info):
        return False


class FakeSession:
    pings = 0
    urls: list = []

    def __init__(self, *args, **kwargs) -> None:
        pass

    async def __aenter__(self) -> "FakeSession":
        return self

    async def __aexit__(self, *exc_info):
        return False

    def get(self, url: str) -> TimingOutRequest:
        FakeSession.urls.append(url)
        return TimingOutRequest(FakeSession)


class KeepAliveTestCase(unittest.TestCase):
    def setUp(self) -> None:
        FakeSession.pings = 0
        FakeSession.urls = []
        keep_alive.keep_alive_task = None

    def test_timeout_does_not_stop_pinging(self) -> None:
        async def run():
            task = asyncio.create_task(ping_self("https://fittrack.example.com/", interval=0))
            for _ in range(50):
                await asyncio.sleep(0)
            done = task.done()
            task.cancel()
            return done

        with mock.patch("utils.keep_alive.aiohttp.ClientSession", FakeSession):
            done = asyncio.run(run())

        self.assertFalse(done)
        self.assertGreater(FakeSession.pings, 1)
        self.assertEqual(FakeSession.urls[0], "https://fittrack.example.com/health")

    def test_not_started_without_url(self) -> None:
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertIsNone(start_keep_alive())

    def test_task_is_retained(self) -> None:
        async def run():
            task = start_keep_alive()
            same = start_keep_alive() is task
            held = keep_alive.keep_alive_task is task
            task.cancel()
            return same, held

        with mock.patch.dict(os.environ, {"RENDER_EXTERNAL_URL": "https://fittrack.example.com"}), \
                mock.patch("utils.keep_alive.aiohttp.ClientSession", FakeSession):
            same, held = asyncio.run(run())

        self.assertTrue(same)
        self.assertTrue(held)


if __name__ == "__main__":
    unittest.main()
