"""Tests for theme selection and role-based styling."""

from __future__ import annotations

import unittest

from lazyls import ui_theme


class ResolveThemeTests(unittest.TestCase):
    def test_no_color_always_selects_plain_theme(self) -> None:
        self.assertIs(ui_theme.resolve_theme("ocean", no_color=True), ui_theme.PLAIN_THEME)

    def test_unknown_or_missing_names_fall_back_to_default(self) -> None:
        self.assertIs(ui_theme.resolve_theme(None), ui_theme.DEFAULT_THEME)
        self.assertIs(ui_theme.resolve_theme("does-not-exist"), ui_theme.DEFAULT_THEME)
        self.assertIs(ui_theme.resolve_theme("plain"), ui_theme.DEFAULT_THEME)
        self.assertIs(ui_theme.resolve_theme("  OCEAN "), ui_theme.OCEAN_THEME)

    def test_available_theme_names_excludes_plain(self) -> None:
        self.assertEqual(ui_theme.available_theme_names(), ("default", "ocean"))


class StylizeTests(unittest.TestCase):
    def test_every_role_has_a_style_in_each_theme(self) -> None:
        for theme in (ui_theme.DEFAULT_THEME, ui_theme.OCEAN_THEME):
            for role in ui_theme.StyleRole:
                with self.subTest(theme=theme.name, role=role):
                    self.assertTrue(ui_theme.style_for(role, theme).startswith("\033["))

    def test_stylize_wraps_text_with_role_prefix_and_reset(self) -> None:
        styled = ui_theme.stylize("DIR", ui_theme.StyleRole.TAG_DIR, ui_theme.DEFAULT_THEME)

        self.assertEqual(styled, ui_theme.DEFAULT_THEME.tag_dir + "DIR" + "\033[0m")

    def test_plain_theme_leaves_text_untouched(self) -> None:
        for role in ui_theme.StyleRole:
            with self.subTest(role=role):
                self.assertEqual(ui_theme.stylize("text", role, ui_theme.PLAIN_THEME), "text")


if __name__ == "__main__":
    unittest.main()
