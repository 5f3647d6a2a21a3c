"""
logintoken Demo Application

Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

This demo shows the passwordless login flow:
- Token issuance for an account
- Login URL construction for delivery
- Single-use redemption
"""

import logging
import sys

from logintoken.common.utils import mask_sensitive_data
from logintoken.core.config import LoginTokenConfig
from logintoken.tokenstore import LoginTokenStore, TokenNotFoundError


def main() -> int:
    """Main demo function"""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    print("logintoken Demo Application")
    print("=" * 50)
    print()

    try:
        config = LoginTokenConfig.from_env()
        store = LoginTokenStore(config)
        print("✓ Created login token store with config")
        print(f"  - Login URL: {config.login_url}")
        print(f"  - Token Length: {config.token_length}")
        print(f"  - Token Expiry: {config.token_expiry}")
        print()

    except ValueError as e:
        print(f"✗ Invalid configuration: {e}")
        return 1

    print("Step 1: Token Issuance")
    print("-" * 40)

    token = store.issue(42)
    print(f"✓ Issued token {mask_sensitive_data(token.value)} for account {token.account_id}")
    print(f"  - Expires: {token.expiry.isoformat()}")
    print(f"  - Login URL: {store.login_url(token)}")
    print()

    print("Step 2: Redemption")
    print("-" * 40)

    try:
        account_id = store.redeem(token.value)
        print(f"✓ Token redeemed for account {account_id}")
    except TokenNotFoundError as e:
        print(f"✗ Redemption failed: {e}")
        return 1

    try:
        store.redeem(token.value)
        print("✗ Second redemption unexpectedly succeeded")
        return 1
    except TokenNotFoundError as e:
        print(f"✓ Second redemption rejected: {e}")
    print()

    print("Demo completed successfully!")
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nDemo interrupted by user")
        sys.exit(1)
