from reflex.plugins.sitemap import SitemapPlugin

from rxconfig import config


def test_sitemap_plugin_disabled_by_class():
    assert config.app_name == "motoparts"
    assert SitemapPlugin in config.disable_plugins
