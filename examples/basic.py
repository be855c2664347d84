"""Basic usage examples for the Nexmo Verify SDK.

This example demonstrates:
- Starting a verification with start_verification()
- Checking the user's code with check_verification()
- Looking up a verification with get_verification()
- Cancelling or advancing a verification
"""

import logging
import os
import sys

from nexmo import AuthenticationError, Client, ConfigurationError, NexmoError, TimeoutError

NUMBER = os.getenv("NEXMO_TEST_NUMBER", "447700900000")


def start_and_check():
    """Start a verification and check the code the user received."""
    print("=" * 50)
    print("Start and Check")
    print("=" * 50)

    # Reads NEXMO_API_KEY / NEXMO_API_SECRET when key/secret are not passed
    with Client() as client:
        try:
            response = client.start_verification(number=NUMBER, brand="Acme")
            print(f"Start response: {response}")

            if response.get("status") != "0":
                print(f"Verification not started: {response.get('error_text')}")
                return

            request_id = response["request_id"]
            code = input("Enter the code you received: ")

            result = client.check_verification(request_id, code=code)
            print(f"Check status: {result.get('status')}")

        except AuthenticationError:
            print("Error: Invalid API key or secret")
        except TimeoutError:
            print("Error: Request timed out")
        except NexmoError as e:
            print(f"Error: {e.message}")


def search_and_control(request_id: str):
    """Inspect a verification, then cancel it or move to the next event."""
    print("\n" + "=" * 50)
    print("Search and Control")
    print("=" * 50)

    client = Client()

    try:
        details = client.get_verification(request_id)
        print(f"Status: {details.get('status')}")

        # Skip straight to the voice call instead of waiting for the SMS
        print(client.trigger_next_verification_event(request_id))

        print(client.cancel_verification(request_id))
    except NexmoError as e:
        print(f"Error: {e}")
    finally:
        client.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)

    try:
        if len(sys.argv) > 1:
            search_and_control(sys.argv[1])
        else:
            start_and_check()
    except ConfigurationError as e:
        print(f"Configuration error: {e}")
