#!/usr/bin/env python3
"""
Checks that the configured SMTP server is reachable and accepts the
credentials, optionally sending a test OTP email.

    python scripts/check_smtp_connectivity.py [--send-to you@example.com]
"""
import argparse
import asyncio
import os
import socket
import sys

import aiosmtplib
from dotenv import load_dotenv

load_dotenv()
sys.path.append(os.getcwd())

from app.core.config import settings
from app.services.notifications import EmailSender


def print_step(msg):
    print(f"\n[-] {msg}")

def print_success(msg):
    print(f"    [OK] {msg}")

def print_error(msg):
    print(f"    [ERROR] {msg}")


async def check_login() -> bool:
    client = aiosmtplib.SMTP(
        hostname=settings.SMTP_SERVER,
        port=settings.SMTP_PORT,
        use_tls=settings.SMTP_USE_TLS,
        start_tls=settings.SMTP_USE_STARTTLS,
        timeout=settings.SMTP_TIMEOUT,
    )
    try:
        await client.connect()
        print_success(f"Connected to {settings.SMTP_SERVER}")
        if settings.SMTP_USERNAME and settings.SMTP_PASSWORD:
            await client.login(settings.SMTP_USERNAME, settings.SMTP_PASSWORD)
            print_success("Authentication Successful!")
        else:
            print("    Skipping authentication (No username/password provided)")
        await client.quit()
        return True
    except aiosmtplib.SMTPAuthenticationError as e:
        print_error(f"Authentication Failed: {e}")
    except (aiosmtplib.SMTPException, asyncio.TimeoutError, OSError) as e:
        print_error(f"SMTP Error: {e}")
    return False


def main(argv=None):
    parser = argparse.ArgumentParser(description="SMTP connectivity checker")
    parser.add_argument("--send-to", help="send a test OTP email to this address")
    args = parser.parse_args(argv)

    print(f"{'=' * 60}\nSMTP CONNECTIVITY CHECKER\n{'=' * 60}")

    if not settings.SMTP_SERVER:
        print_error("SMTP_SERVER is not set!")
        return 1

    print(f"    Server: {settings.SMTP_SERVER}:{settings.SMTP_PORT}")
    print(f"    User: {settings.SMTP_USERNAME}")
    print(f"    TLS: {settings.SMTP_USE_TLS}  STARTTLS: {settings.SMTP_USE_STARTTLS}")

    print_step(f"Checking DNS resolution for {settings.SMTP_SERVER}...")
    try:
        print_success(f"Resolved to {socket.gethostbyname(settings.SMTP_SERVER)}")
    except socket.gaierror as e:
        print_error(f"DNS Resolution Failed: {e}")
        return 1

    print_step("Attempting SMTP Handshake & Authentication...")
    if not asyncio.run(check_login()):
        return 1

    if args.send_to:
        print_step(f"Sending test OTP email to {args.send_to}...")
        asyncio.run(EmailSender().send_otp(args.send_to, "123456", settings.OTP_EXPIRY_MINUTES))
        print_success("Test email handed to the SMTP server")

    return 0


if __name__ == "__main__":
    sys.exit(main())
