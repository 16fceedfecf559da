"""Tests for loading plugins from Python files."""

import textwrap

import pytest

from tagdown import PluginManager
from tagdown.plugins.loader import load_plugins_from_file

PLUGIN_FILE = textwrap.dedent(
    '''
    from tagdown import Plugin, Preset
    from tagdown.plugins.predefined import StrongPlugin


    class MarkPlugin(Plugin):
        tag_names = ("mark",)

        def transform(self, transformation, context):
            transformation.output("==")
            return True


    class _HelperPlugin(Plugin):
        tag_names = ("ignored",)


    class AbstractPlugin(Plugin):
        """No tag names, so not instantiated."""


    small = Preset([StrongPlugin()])
    '''
)


class TestLoadPluginsFromFile:
    """Test load_plugins_from_file()."""

    def test_collects_classes_and_presets(self, tmp_path):
        """Test plugin classes and presets defined in the file are loaded."""
        path = tmp_path / "my_plugins.py"
        path.write_text(PLUGIN_FILE)

        plugins = load_plugins_from_file(path)
        names = sorted(plugin.__class__.__name__ for plugin in plugins)

        assert names == ["MarkPlugin", "StrongPlugin"]

    def test_imported_classes_not_instantiated(self, tmp_path):
        """Test plugin classes imported into the file are skipped."""
        path = tmp_path / "imports_only.py"
        path.write_text("from tagdown.plugins.predefined import StrongPlugin\n")

        assert load_plugins_from_file(path) == []

    def test_plugin_instances(self, tmp_path):
        """Test module-level plugin instances are loaded as-is."""
        path = tmp_path / "instances.py"
        path.write_text("from tagdown.plugins.predefined import QuotePlugin\n\nquote = QuotePlugin()\n")

        plugins = load_plugins_from_file(str(path))

        assert len(plugins) == 1
        assert plugins[0].get_tag_names() == ("q",)

    def test_loaded_plugins_register(self, tmp_path):
        """Test loaded plugins can be registered."""
        path = tmp_path / "my_plugins.py"
        path.write_text(PLUGIN_FILE)
        manager = PluginManager()

        for plugin in load_plugins_from_file(path):
            manager.register(plugin)

        assert "mark" in manager
        assert "strong" in manager

    def test_missing_file(self, tmp_path):
        """Test a missing file is reported."""
        with pytest.raises(FileNotFoundError):
            load_plugins_from_file(tmp_path / "missing.py")

    def test_broken_file(self, tmp_path):
        """Test errors while importing the file propagate."""
        path = tmp_path / "broken.py"
        path.write_text("def broken(:\n")

        with pytest.raises(SyntaxError):
            load_plugins_from_file(path)
