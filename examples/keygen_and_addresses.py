#!/usr/bin/env python3

"""Generate wallets and show their classic and X-address forms"""

from xrp_signer import (
    Ed25519Wallet,
    Secp256k1Wallet,
    XrplNetwork,
    classic_to_extended,
    decode_extended,
)


def show_wallet(label: str, wallet) -> None:
    """Print a wallet's keys and addresses"""
    print(f"--- {label} ---")
    print(f"Public key:      {wallet.public_key}")
    print(f"Classic address: {wallet.classic_address}")
    print(f"X-address:       {wallet.get_address()}")
    print(f"X-address (tag): {wallet.get_address(tag=12345)}")


def main():
    """Main example function"""
    print("=== XRP Key Generation & Address Encoding ===")

    show_wallet("Ed25519, mainnet", Ed25519Wallet.generate())
    secp_wallet = Secp256k1Wallet.generate(XrplNetwork.TEST)
    show_wallet("secp256k1, testnet", secp_wallet)
    print(f"Mnemonic:        {secp_wallet.mnemonic}")
    print(f"Derivation path: {secp_wallet.derivation_path}")

    # Round trip a classic address through the X-address form
    classic = "rU6K7V3Po4snVhBBaU29sesqs2qTQJWDw1"
    x_address = classic_to_extended(classic, tag=12345)
    decoded = decode_extended(x_address)

    print("--- Conversion ---")
    print(f"{classic} + tag 12345 -> {x_address}")
    print(f"{x_address} -> {decoded.classic_address}, tag {decoded.tag}, test={decoded.is_test}")


if __name__ == "__main__":
    main()
