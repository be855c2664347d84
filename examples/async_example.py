"""Async example for the Nexmo Verify SDK.

This example demonstrates async/await usage with the AsyncClient:
- Async context manager usage
- Starting verifications for several numbers concurrently
- Cancelling them again
"""

import asyncio
import os
from typing import List

from nexmo import AsyncClient, AuthenticationError, NexmoError

NUMBERS = os.getenv("NEXMO_TEST_NUMBERS", "447700900000,447700900001").split(",")


async def start_many(client: AsyncClient, numbers: List[str]) -> List[str]:
    """Start one verification per number and return the request IDs."""
    responses = await asyncio.gather(
        *(client.start_verification(number=number, brand="Acme") for number in numbers),
        return_exceptions=True,
    )

    request_ids = []
    for number, response in zip(numbers, responses):
        if isinstance(response, NexmoError):
            print(f"{number}: failed ({response.message})")
        elif response.get("status") == "0":
            print(f"{number}: started {response['request_id']}")
            request_ids.append(response["request_id"])
        else:
            print(f"{number}: rejected ({response.get('error_text')})")
    return request_ids


async def main():
    async with AsyncClient() as client:
        try:
            request_ids = await start_many(client, NUMBERS)
            for request_id in request_ids:
                print(await client.cancel_verification(request_id))
        except AuthenticationError:
            print("Error: Invalid API key or secret")


if __name__ == "__main__":
    asyncio.run(main())
