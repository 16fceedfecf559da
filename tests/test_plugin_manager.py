"""Tests for plugins, presets and the plugin registry."""

import pytest

from tagdown import DefaultPreset, Plugin, PluginError, PluginManager, Preset


class XYPlugin(Plugin):
    tag_names = ("x", "y")


class XPlugin(Plugin):
    tag_names = ("x",)


class TestPlugin:
    """Test the Plugin base class."""

    def test_default_hooks(self):
        """Test default transform descends and other hooks are no-ops."""
        plugin = XPlugin()

        assert plugin.transform(None, {}) is True
        assert plugin.before(None, {}) is None
        assert plugin.after(None, {}) is None

    def test_string_tag_names(self):
        """Test a single string is treated as one tag name."""

        class StrongOnly(Plugin):
            tag_names = "strong"

        assert StrongOnly().get_tag_names() == ("strong",)

    def test_repr(self):
        """Test repr lists the tag names."""
        assert repr(XYPlugin()) == "XYPlugin(tag_names=['x', 'y'])"


class TestPreset:
    """Test Preset."""

    def test_fluent_add(self):
        """Test add() returns the preset and keeps order."""
        first, second = XYPlugin(), XPlugin()
        preset = Preset(name="custom").add(first).add(second)

        assert list(preset) == [first, second]
        assert len(preset) == 2
        assert preset.name == "custom"

    def test_default_name(self):
        """Test the class name is used when no name is given."""
        assert Preset().name == "Preset"

    def test_default_preset_contents(self):
        """Test the default preset covers the common tags."""
        manager = PluginManager()
        manager.register_preset(DefaultPreset())

        for tag_name in ["a", "b", "blockquote", "br", "code", "h1", "h6", "hr", "img", "li", "p", "pre", "q", "ul"]:
            assert tag_name in manager


class TestPluginManager:
    """Test PluginManager registration and lookup."""

    def test_register_and_get(self):
        """Test lookup by each declared tag name."""
        manager = PluginManager()
        plugin = XYPlugin()

        manager.register(plugin)

        assert manager.get("x") is plugin
        assert manager.get("y") is plugin
        assert manager.get("z") is None

    def test_lookup_is_case_insensitive(self):
        """Test tag names are matched case-insensitively."""

        class UpperPlugin(Plugin):
            tag_names = ("B", "Strong")

        manager = PluginManager()
        plugin = UpperPlugin()
        manager.register(plugin)

        assert manager.get("b") is plugin
        assert manager.get("STRONG") is plugin
        assert "strong" in manager

    def test_get_without_tag_name(self):
        """Test falsy tag names have no plugin."""
        manager = PluginManager()
        manager.register(XPlugin())

        assert manager.get(None) is None
        assert manager.get("") is None

    def test_conflict_replaces_only_shared_tags(self):
        """Test a later plugin takes over shared tag names only."""
        manager = PluginManager()
        first, second = XYPlugin(), XPlugin()

        manager.register(first)
        manager.register(second)

        assert manager.get("x") is second
        assert manager.get("y") is first
        assert set(map(id, manager.plugins)) == {id(first), id(second)}

    def test_fully_replaced_plugin_inactive(self):
        """Test a plugin is dropped once all its tags are taken over."""
        manager = PluginManager()
        first, second = XPlugin(), XPlugin()

        manager.register(first)
        manager.register(second)

        assert manager.plugins == [second]

    def test_register_is_idempotent(self):
        """Test registering the same plugin twice changes nothing."""
        manager = PluginManager()
        plugin = XYPlugin()

        manager.register(plugin)
        manager.register(plugin)

        assert manager.plugins == [plugin]
        assert sorted(manager.tag_names()) == ["x", "y"]
        assert len(manager) == 2

    def test_register_preset_in_order(self):
        """Test preset plugins register in order so later ones win."""
        manager = PluginManager()
        first, second = XYPlugin(), XPlugin()

        manager.register_preset(Preset([first, second]))

        assert manager.get("x") is second
        assert manager.get("y") is first

    def test_later_registration_overrides_preset(self):
        """Test a plugin registered after a preset overrides its tags."""
        manager = PluginManager()
        manager.register_preset(DefaultPreset())

        class BoldPlugin(Plugin):
            tag_names = ("b",)

        bold = BoldPlugin()
        manager.register(bold)

        assert manager.get("b") is bold
        assert manager.get("strong") is not bold

    def test_empty_tag_names_rejected(self):
        """Test plugins must declare tag names."""

        class NoTags(Plugin):
            pass

        with pytest.raises(PluginError) as exc_info:
            PluginManager().register(NoTags())

        assert exc_info.value.context == {"plugin": "NoTags"}

    def test_iteration(self):
        """Test iterating yields distinct plugins."""
        manager = PluginManager()
        plugin = XYPlugin()
        manager.register(plugin)

        assert list(manager) == [plugin]
