"""Tests for the page template."""

from bs4 import BeautifulSoup

from blog_generator import config
from blog_generator.render import format_post_date, render_blog_html


class TestFormatPostDate:
    def test_iso_date(self):
        assert format_post_date("2025-03-07") == "March 7, 2025"

    def test_unparseable_date_returned_as_is(self):
        assert format_post_date("sometime in spring") == "sometime in spring"

    def test_empty_date(self):
        assert format_post_date("") == ""


class TestRenderBlogHtml:
    def test_fields_substituted(self, sample_content):
        html = render_blog_html(sample_content, site_url="https://blog.example.com")
        soup = BeautifulSoup(html, "html.parser")

        assert soup.title.get_text() == f"{sample_content['title']} | {config.SITE_NAME}"
        assert soup.find("meta", attrs={"name": "description"})["content"] == sample_content["description"]
        assert soup.find("meta", attrs={"name": "keywords"})["content"] == "outdoor games, play, health"
        assert soup.find("meta", attrs={"name": "author"})["content"] == "Jamie Rivera"
        assert "March 7, 2025" in html
        assert "6 min read" in html

    def test_og_url_uses_title_slug(self, sample_content):
        html = render_blog_html(sample_content, site_url="https://blog.example.com/")
        soup = BeautifulSoup(html, "html.parser")
        og_url = soup.find("meta", attrs={"property": "og:url"})["content"]
        assert og_url == "https://blog.example.com/blogs/10-essential-benefits-of-outdoor-games.html"

    def test_sections_rendered_in_order(self, sample_content):
        soup = BeautifulSoup(render_blog_html(sample_content), "html.parser")
        body = soup.find("div", class_="article-content")
        assert [h2.get_text() for h2 in body.find_all("h2")] == ["Physical Health", "Social Skills"]

    def test_list_only_when_items_present(self, sample_content):
        soup = BeautifulSoup(render_blog_html(sample_content), "html.parser")
        lists = soup.find("div", class_="article-content").find_all("ul")
        assert len(lists) == 1
        assert [li.get_text() for li in lists[0].find_all("li")] == ["Stronger bones", "Better sleep"]

    def test_section_without_image_has_no_img(self, sample_content):
        soup = BeautifulSoup(render_blog_html(sample_content), "html.parser")
        imgs = soup.find("div", class_="article-content").find_all("img")
        assert len(imgs) == 1

    def test_sidebar_shows_first_five_tags(self, sample_content):
        sample_content["tags"] = [f"tag{i}" for i in range(8)]
        soup = BeautifulSoup(render_blog_html(sample_content), "html.parser")
        sidebar_tags = soup.find("aside").find_all("span", class_="tag")
        assert [t.get_text() for t in sidebar_tags] == ["tag0", "tag1", "tag2", "tag3", "tag4"]
        assert len(soup.find("main").find_all("span", class_="tag")) == 8

    def test_related_posts_in_sidebar(self, sample_content):
        soup = BeautifulSoup(render_blog_html(sample_content), "html.parser")
        link = soup.find("aside").find("div", class_="related-post").find("a")
        assert link["href"] == "/blogs/indoor-games.html"
        assert link.get_text() == "Indoor Games for Rainy Days"

    def test_no_related_posts_section_when_empty(self, sample_content):
        sample_content["relatedPosts"] = []
        assert "Related Posts" not in render_blog_html(sample_content)

    def test_unescaped_by_default(self, sample_content):
        sample_content["sections"][0]["content"] = "Play <em>every</em> day"
        sample_content["featuredImage"]["altText"] = 'Kids "playing"'
        html = render_blog_html(sample_content)
        assert "<p>Play <em>every</em> day</p>" in html
        assert 'alt="Kids "playing""' in html

    def test_escape_option(self, sample_content):
        sample_content["sections"][0]["content"] = "Play <em>every</em> day"
        sample_content["featuredImage"]["altText"] = 'Kids "playing"'
        html = render_blog_html(sample_content, escape=True)
        assert "<p>Play &lt;em&gt;every&lt;/em&gt; day</p>" in html
        assert 'alt="Kids &quot;playing&quot;"' in html

    def test_missing_optional_fields(self):
        html = render_blog_html({"title": "Only a title"})
        assert "<h1 class=\"article-title\" itemprop=\"headline\">Only a title</h1>" in html

    def test_null_date_renders_empty(self, sample_content):
        sample_content["date"] = None
        soup = BeautifulSoup(render_blog_html(sample_content), "html.parser")
        published = soup.find("span", attrs={"itemprop": "datePublished"})
        assert published.get_text() == ""
        assert "None" not in published.get_text()
