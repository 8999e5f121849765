"""
Configuration and Logging Examples

Shows explicit ClientConfig/RetryConfig, environment configuration and
structured JSON logging (tokens are masked in log output).
"""

import asyncio

from postmark_client import (
    ClientConfig,
    LoggingConfig,
    RetryConfig,
    ServerClient,
    load_from_env,
    print_config_summary,
)
from postmark_client.core.env_config import load_settings


def explicit_config() -> ClientConfig:
    """Short timeout, two retries with fixed 1s backoff."""
    print("\n=== Explicit Config ===")

    config = ClientConfig.create(
        timeout=30,
        retry=RetryConfig(max_retries=2, backoff="fixed", backoff_base=1.0),
        headers={"X-Request-Source": "examples"},
        logging=LoggingConfig.create(level="DEBUG", format="json"),
    )
    print_config_summary(config)
    return config


def environment_config() -> ClientConfig:
    """POSTMARK_* variables, .env file, then overrides."""
    print("\n=== Environment Config ===")

    config = load_from_env(max_retries=0)
    print_config_summary(config, load_settings())
    return config


async def main():
    config = explicit_config()
    environment_config()

    async with ServerClient("POSTMARK_API_TEST", config) as client:
        server = await client.get_server()
        print(f"Server: {server.name}")


if __name__ == "__main__":
    asyncio.run(main())
