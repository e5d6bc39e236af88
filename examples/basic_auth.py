"""
Basic Authentication Example - Login, validate and logout against a fake directory.

The directory is simulated with httpx.MockTransport so the example runs offline.
"""

import httpx

from directory_auth import SessionClient, Credential
from directory_auth.adapters import HTTPDirectoryAdapter, JWTTokenCodec, MemoryRevocationStore


def fake_directory(request: httpx.Request) -> httpx.Response:
    """Knows one active user, alice@example.com."""
    if b"alice@example.com" not in request.content:
        return httpx.Response(404)
    return httpx.Response(200, json={
        "id": "2b7c1a52-8f0e-4a8e-9c55-4f6a0b7f3e11",
        "email": "alice@example.com",
        "username": "alice",
        "role": 1,
        "isActive": True,
    })


def main():
    directory = HTTPDirectoryAdapter(
        "http://clients-service",
        client=httpx.Client(
            transport=httpx.MockTransport(fake_directory),
            base_url="http://clients-service",
        ),
    )
    client = SessionClient(
        directory=directory,
        codec=JWTTokenCodec(secret="my-secret-key-with-at-least-32-bytes"),
        revocations=MemoryRevocationStore(),
    )

    # Unknown user
    outcome = client.login(Credential("mallory", "guess"))
    print(f"Login as mallory: {outcome.reason}")

    # Login
    outcome = client.login(Credential("alice@example.com", "correct horse"))
    print(f"\nLogin successful!")
    print(f"Token: {outcome.token[:50]}...")

    # Validate
    result = client.authorize(outcome.token)
    print(f"\nToken verified: subject={result.claims.subject} role={result.claims.role}")
    print(f"Expires at: {result.claims.expires_at.isoformat()}")

    # Logout
    client.logout(result.claims)
    print(f"\nLogged out successfully")

    # Validate after logout (should fail)
    result = client.authorize(outcome.token)
    print(f"Token after logout: {result.failure.value}")

    client.close()


if __name__ == "__main__":
    main()
