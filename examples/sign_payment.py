#!/usr/bin/env python3

"""Sign a Payment offline and print the blob and its transaction ID"""

import logging

from xrp_signer import (
    CurrencyAmount,
    Payment,
    Signer,
    Secp256k1Wallet,
    Transaction,
    XrpDropsAmount,
    XrplNetwork,
    transaction_hash,
)

# Published test key; never use it for real funds
PRIVATE_KEY = "0090802A50AA84EFB6CDB225F17C27616EA94048C179142FECF03F4712A07EA7A4"
DESTINATION = "XVPcpSm47b1CZkf5AkKM9a84dQHe3mTAxgxfLw2qYoe7Boa"


def main():
    """Main example function"""
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    print("=== XRP Offline Payment Signing ===")
    wallet = Secp256k1Wallet.from_private_key(PRIVATE_KEY, XrplNetwork.TEST)
    print(f"Sender: {wallet.classic_address}")

    transaction = Transaction(
        account=wallet.classic_address,
        fee=XrpDropsAmount(drops=12),
        sequence=1,
        last_ledger_sequence=1000,
        signing_public_key=bytes.fromhex(wallet.public_key),
        body=Payment(
            destination=DESTINATION,
            amount=CurrencyAmount.of_drops(1_000_000),
        ),
    )

    signed = Signer().sign_structured(transaction, wallet)
    if signed is None:
        print("Transaction is incomplete; nothing was signed")
        return

    print(f"Signed blob:    {signed.hex().upper()}")
    print(f"Transaction ID: {transaction_hash(signed)}")


if __name__ == "__main__":
    main()
