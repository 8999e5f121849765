"""
Sending Email Examples

Demonstrates single, batch and templated sends with ServerClient.
Set POSTMARK_SERVER_TOKEN before running (use "POSTMARK_API_TEST" for a
sandbox token that accepts requests without delivering).
"""

import asyncio
import os

from postmark_client import InactiveRecipientsError, PostmarkError, ServerClient
from postmark_client.models import Message, TemplatedMessage

SENDER = os.environ.get("POSTMARK_SENDER", "sender@example.com")


async def send_single(client: ServerClient):
    """One plain-text + HTML email."""
    print("\n=== Single Email ===")

    response = await client.send_email(Message(
        from_=SENDER,
        to="receiver@example.com",
        subject="Hello from Postmark",
        text_body="Hello!",
        html_body="<p>Hello!</p>",
        tag="examples",
        track_opens=True,
    ))
    print(f"MessageID: {response.message_id}")


async def send_batch(client: ServerClient):
    """Several emails in one request."""
    print("\n=== Batch ===")

    messages = [
        Message(from_=SENDER, to=f"user{i}@example.com", subject="Batch", text_body=f"#{i}")
        for i in range(3)
    ]
    for response in await client.send_email_batch(messages):
        print(f"{response.to}: {response.message} ({response.error_code})")


async def send_with_template(client: ServerClient):
    """Server-side template by alias."""
    print("\n=== Template ===")

    try:
        response = await client.send_email_with_template(TemplatedMessage(
            from_=SENDER,
            to="receiver@example.com",
            template_alias="welcome",
            template_model={"name": "Ann"},
        ))
        print(f"MessageID: {response.message_id}")
    except InactiveRecipientsError as e:
        print(f"Inactive recipients: {e.recipients}")
    except PostmarkError as e:
        print(f"Failed: [{e.error_code}] {e.message}")


def on_complete(error, result):
    """Callback receives the same outcome as the coroutine."""
    if error is not None:
        print(f"callback: failed with {error!r}")
    else:
        print(f"callback: sent {result.message_id}")


async def send_with_callback(client: ServerClient):
    print("\n=== Callback ===")

    await client.send_email(
        {"From": SENDER, "To": "receiver@example.com", "Subject": "Hi", "TextBody": "Hi"},
        callback=on_complete,
    )


async def main():
    async with ServerClient.from_env() as client:
        await send_single(client)
        await send_batch(client)
        await send_with_template(client)
        await send_with_callback(client)


if __name__ == "__main__":
    asyncio.run(main())
