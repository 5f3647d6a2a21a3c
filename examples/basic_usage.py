"""
Basic logintoken usage example.

This example demonstrates the fundamental logintoken operations:
- Creating a token store
- Issuing a login token
- Redeeming it from several threads at once
- Expiry handling
"""

import time
from concurrent.futures import ThreadPoolExecutor
from datetime import timedelta

from logintoken import LoginTokenConfig, LoginTokenStore, TokenNotFoundError


def basic_example():
    """Demonstrate basic logintoken usage"""
    print("Basic logintoken Example")
    print("=" * 30)

    # 1. Create configuration
    config = LoginTokenConfig(
        login_url="https://app.example.com/login",
        token_length=32,
        token_expiry=timedelta(seconds=1),
    )

    # 2. Create store
    store = LoginTokenStore(config)
    print("✓ Created login token store")

    # 3. Issue a token and hand the URL to the delivery channel
    token = store.issue(1001)
    print(f"✓ Login URL: {store.login_url(token)}")

    # 4. Race eight redemptions; exactly one wins
    def attempt(_):
        try:
            return store.redeem(token.value)
        except TokenNotFoundError:
            return None

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(attempt, range(8)))
    print(f"✓ Successful redemptions: {[r for r in results if r is not None]}")

    # 5. Let a second token expire
    stale = store.issue(1002)
    time.sleep(1.1)
    try:
        store.redeem(stale.value)
    except TokenNotFoundError as e:
        print(f"✓ Stale link rejected: {e}")

    # 6. Next issuance sweeps the expired entry
    store.issue(1003)
    print(f"✓ Tokens held after sweep: {store.count_tokens()}")


if __name__ == "__main__":
    basic_example()
