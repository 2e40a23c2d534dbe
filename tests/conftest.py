# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import pytest
from helpers.builders import make_target

from platform_support.catalog import StaticTargetCatalog


@pytest.fixture
def sample_catalog() -> StaticTargetCatalog:
    """Return a small catalog touching every bucket except tier 1 without host tools."""

    return StaticTargetCatalog.of(
        [
            make_target("x86_64-unknown-linux-gnu", 1, host_tools=True, std=True, description="64-bit Linux"),
            make_target("aarch64-apple-darwin", 1, host_tools=True, std=True, description="ARM64 macOS"),
            make_target("riscv64gc-unknown-linux-gnu", 2, host_tools=True, std=True, description="RISC-V Linux"),
            make_target("wasm32-unknown-unknown", 2, host_tools=False, std=True, description="WebAssembly"),
            make_target("thumbv6m-none-eabi", 2, std=False, description="Bare Armv6-M"),
            make_target("x86_64-unknown-uefi", 2, description="64-bit UEFI"),
            make_target("avr-none", 3, host_tools=False, std=False, description="AVR"),
            make_target("aarch64-unknown-openbsd", 3, host_tools=True, std=True),
        ],
    )
