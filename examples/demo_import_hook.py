import logging
import os
from pathlib import Path
import sys
import tempfile
import time

# Allow running this demo without installing the package:
#   python examples/demo_import_hook.py
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import redis

from redis_resolver import CachedResolver, DirectoryResolver, RedisStore

logging.basicConfig(level=logging.DEBUG)
logger = logging.getLogger(__name__)


def main() -> None:
    redis_url = os.getenv("REDIS_URL", "redis://localhost:6379/0")
    client = redis.Redis.from_url(redis_url)

    with tempfile.TemporaryDirectory() as src:
        package_dir = Path(src, "demo_plugins")
        package_dir.mkdir()
        (package_dir / "__init__.py").write_text("")
        (package_dir / "greeting.py").write_text(
            "def hello(name):\n    return f'hello {name}'\n"
        )

        finder = DirectoryResolver()
        finder.add("demo_plugins", src)

        # A fresh prefix per run; cached paths point into a temp directory.
        cached = CachedResolver(RedisStore(client), f"demo.{int(time.time())}", finder)
        cached.register(prepend=True)
        try:
            from demo_plugins import greeting

            logger.info("%s", greeting.hello("world"))
            # Second lookup is served from Redis.
            logger.info("Resolved again: %s", cached.resolve("demo_plugins.greeting"))
            logger.info("Missing module: %s", cached.resolve("demo_plugins.nope"))
            logger.info("Prefixes via delegate: %s", cached.get_prefixes())
        finally:
            cached.unregister()
            client.close()


# Run:
#   1) docker run --rm -p 6379:6379 redis:7
#   2) python examples/demo_import_hook.py


if __name__ == "__main__":
    main()
