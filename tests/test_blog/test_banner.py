"""Tests for the plain-text banner."""

from blog.banner import banner_links, render_banner

SITE = {
    'name': 'dev-xdd',
    'url': 'https://www.dev-xdd.tech',
    'role': 'Backend Developer',
    'links': {
        'github': 'https://github.com/akm-xdd',
        'linkedin': 'https://linkedin.com/in/akm-glhf',
    },
}


class TestBannerLinks:
    def test_all_links(self):
        assert banner_links(SITE) == [
            ('Website', 'https://www.dev-xdd.tech'),
            ('GitHub', 'https://github.com/akm-xdd'),
            ('LinkedIn', 'https://linkedin.com/in/akm-glhf'),
        ]

    def test_skips_missing_links(self):
        site = {'url': 'https://example.com', 'links': {'github': 'https://github.com/x'}}
        assert banner_links(site) == [
            ('Website', 'https://example.com'),
            ('GitHub', 'https://github.com/x'),
        ]

    def test_no_links_at_all(self):
        assert banner_links({}) == []


class TestRenderBanner:
    def test_plain_text_content(self):
        text = render_banner(SITE, color=False)
        assert "\x1b[" not in text
        assert "Hello CLI user!" in text
        assert "dev-xdd" in text
        assert "Backend Developer" in text
        assert "Links" in text
        for label, url in banner_links(SITE):
            assert f"{label}:" in text
            assert url in text

    def test_is_framed(self):
        text = render_banner(SITE, color=False)
        lines = text.splitlines()
        assert lines[0].startswith("╔")
        assert any(line.startswith("╚") for line in lines)

    def test_color_adds_escape_sequences(self):
        text = render_banner(SITE, color=True)
        assert "\x1b[" in text
        assert "Hello CLI user!" in text

    def test_stable_between_calls(self):
        assert render_banner(SITE, color=False) == render_banner(SITE, color=False)

    def test_minimal_site(self):
        text = render_banner({'name': 'site'}, color=False)
        assert "site" in text
        assert "in a browser" not in text
