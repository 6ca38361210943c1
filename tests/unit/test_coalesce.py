"""Unit tests for coalesce_badge().

Verifies label and color precedence between request overrides, service output
and service defaults, and the handling of error badges.
"""

from badgehub.badge.badge_data import BadgeData, BadgeOverrides
from badgehub.badge.coalesce import coalesce_badge

DEFAULTS = BadgeData(label="installs")


class TestCoalesceLabel:
    """Tests for label precedence."""

    def test_default_label_when_service_leaves_it_unset(self) -> None:
        badge = coalesce_badge(BadgeOverrides(), BadgeData(message="12"), DEFAULTS)

        assert badge.label == "installs"

    def test_service_label_wins_over_default(self) -> None:
        badge = coalesce_badge(
            BadgeOverrides(), BadgeData(label="installs@1.26", message="7"), DEFAULTS
        )

        assert badge.label == "installs@1.26"

    def test_override_label_wins_over_service(self) -> None:
        badge = coalesce_badge(
            BadgeOverrides(label="users"),
            BadgeData(label="installs@1.26", message="7"),
            DEFAULTS,
        )

        assert badge.label == "users"

    def test_empty_override_label_is_honoured(self) -> None:
        """An empty label override produces a message-only badge."""
        badge = coalesce_badge(
            BadgeOverrides(label=""), BadgeData(message="12"), DEFAULTS
        )

        assert badge.label == ""

    def test_missing_labels_everywhere_yield_empty_label(self) -> None:
        badge = coalesce_badge(BadgeOverrides(), BadgeData(message="12"), BadgeData())

        assert badge.label == ""


class TestCoalesceColors:
    """Tests for color precedence and defaults."""

    def test_service_color_is_kept(self) -> None:
        badge = coalesce_badge(
            BadgeOverrides(), BadgeData(message="12", color="yellowgreen"), DEFAULTS
        )

        assert badge.color == "yellowgreen"

    def test_default_colors_applied(self) -> None:
        """Unset colors fall back to lightgrey message and grey label."""
        badge = coalesce_badge(BadgeOverrides(), BadgeData(message="12"), DEFAULTS)

        assert badge.color == "lightgrey"
        assert badge.label_color == "grey"

    def test_override_colors_are_normalized(self) -> None:
        """Override colors accept aliases and bare hex."""
        badge = coalesce_badge(
            BadgeOverrides(color="success", label_color="ABCDEF"),
            BadgeData(message="12", color="yellow"),
            DEFAULTS,
        )

        assert badge.color == "brightgreen"
        assert badge.label_color == "#abcdef"

    def test_invalid_override_color_is_ignored(self) -> None:
        badge = coalesce_badge(
            BadgeOverrides(color="notacolor"),
            BadgeData(message="12", color="yellow"),
            DEFAULTS,
        )

        assert badge.color == "yellow"

    def test_override_color_does_not_recolor_errors(self) -> None:
        """Error badges keep their color whatever the override."""
        badge = coalesce_badge(
            BadgeOverrides(color="blue"),
            BadgeData(message="plugin not found", color="red", is_error=True),
            DEFAULTS,
        )

        assert badge.color == "red"
        assert badge.is_error is True

    def test_label_color_override_applies_to_errors(self) -> None:
        badge = coalesce_badge(
            BadgeOverrides(label_color="blue"),
            BadgeData(message="inaccessible", color="lightgrey", is_error=True),
            DEFAULTS,
        )

        assert badge.label_color == "blue"
