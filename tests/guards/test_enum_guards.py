# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Tests for enum and flags-enum membership guards."""
from __future__ import annotations

import enum

import pytest

from guardclauses import ArgumentOutOfRangeError, enum_out_of_range


class Color(enum.Enum):
    RED = 1
    GREEN = 2
    BLUE = 3
    CRIMSON = 1  # alias


class Status(enum.IntEnum):
    PENDING = 0
    SHIPPED = 1


class Permission(enum.IntFlag):
    NONE = 0
    READ = 1
    WRITE = 2
    EXECUTE = 4


class Style(enum.Flag):
    BOLD = 1
    ITALIC = 2
    UNDERLINE = 4


class TestPlainEnum:
    @pytest.mark.parametrize("value", list(Color) + [Color.CRIMSON])
    def test_declared_members_pass(self, guard, value):
        enum_out_of_range(guard, value, parameter_name="color")

    @pytest.mark.parametrize("raw", [1, 2, 3])
    def test_declared_raw_values_pass(self, guard, raw):
        enum_out_of_range(guard, raw, Color, "color")

    def test_undeclared_raw_value_fails(self, guard):
        with pytest.raises(ArgumentOutOfRangeError) as excinfo:
            enum_out_of_range(guard, 99, Color, "color")

        assert excinfo.value.parameter_name == "color"
        assert excinfo.value.message == (
            "Input parameter 'color' with value 99 is not a valid value for enum type Color."
        )

    def test_member_of_another_enum_fails(self, guard):
        with pytest.raises(ArgumentOutOfRangeError):
            enum_out_of_range(guard, Status.SHIPPED, Color, "color")

    def test_int_enum_accepts_raw_ints(self, guard):
        enum_out_of_range(guard, 1, Status, "status")
        with pytest.raises(ArgumentOutOfRangeError):
            enum_out_of_range(guard, 7, Status, "status")

    def test_raw_value_without_enum_type_is_a_type_error(self, guard):
        with pytest.raises(TypeError):
            enum_out_of_range(guard, 99)


class TestFlagsEnum:
    @pytest.mark.parametrize(
        "value",
        [
            Permission.READ,
            Permission.READ | Permission.WRITE,
            Permission.READ | Permission.WRITE | Permission.EXECUTE,
            Permission.NONE,
        ],
    )
    def test_valid_combinations_pass(self, guard, value):
        enum_out_of_range(guard, value, parameter_name="permission")

    @pytest.mark.parametrize("raw", [0, 1, 3, 5, 7])
    def test_valid_raw_masks_pass(self, guard, raw):
        enum_out_of_range(guard, raw, Permission, "permission")

    @pytest.mark.parametrize("raw", [8, 9, 15, 16, 1 << 20])
    def test_bits_outside_the_mask_fail(self, guard, raw):
        with pytest.raises(ArgumentOutOfRangeError) as excinfo:
            enum_out_of_range(guard, raw, Permission, "permission")

        assert "contains undefined flags for enum type Permission" in excinfo.value.message

    @pytest.mark.parametrize("raw", [1.5, 3.0, "3", b"\x01", None])
    def test_non_integer_raw_values_fail(self, guard, raw):
        with pytest.raises(ArgumentOutOfRangeError) as excinfo:
            enum_out_of_range(guard, raw, Permission, "permission")

        assert "contains undefined flags for enum type Permission" in excinfo.value.message

    def test_pseudo_member_with_undefined_bits_fails(self, guard):
        value = Permission.READ | 8

        with pytest.raises(ArgumentOutOfRangeError):
            enum_out_of_range(guard, value, parameter_name="permission")

    def test_plain_flag_type(self, guard):
        enum_out_of_range(guard, Style.BOLD | Style.UNDERLINE, parameter_name="style")
        enum_out_of_range(guard, 0, Style, "style")
        with pytest.raises(ArgumentOutOfRangeError):
            enum_out_of_range(guard, 8, Style, "style")

    def test_zero_passes_even_without_a_none_member(self, guard):
        enum_out_of_range(guard, 0, Style, "style")

    def test_custom_message(self, guard):
        with pytest.raises(ArgumentOutOfRangeError, match="^bad flags$"):
            enum_out_of_range(guard, 64, Permission, "permission", "bad flags")
