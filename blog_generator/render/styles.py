"""Inline stylesheet and static asset links embedded in every page."""

FAVICON_URL = "https://cdn.jsdelivr.net/gh/w3cdpass/static@latest/(blogs)/public/favicon.png"
FONT_AWESOME_URL = "https://cdnjs.cloudflare.com/ajax/libs/font-awesome/6.7.2/css/all.min.css"
FONT_BASE_URL = "http://cdn.jsdelivr.net/gh/w3cdpass/static@latest/(blogs)/fonts"

PAGE_CSS = """
    * {
        margin: 0;
        padding: 0;
        box-sizing: border-box;
    }

    @font-face {
        font-family: "semiBoldW";
        src: url("%(fonts)s/Exo2-SemiBold.ttf");
    }

    @font-face {
        font-family: "mediumW";
        src: url("%(fonts)s/Exo2-Medium.ttf");
    }

    body {
        font-family: "mediumW", sans-serif;
        line-height: 1.6;
        color: #333;
        background-color: #f5f5f5;
    }

    .pageWrap {
        width: 100%%;
        min-height: 100vh;
        display: flex;
        justify-content: center;
    }

    .container {
        padding: 20px;
        width: 100%%;
        max-width: 1200px;
    }

    .breadcrumb {
        margin-bottom: 20px;
        font-size: 14px;
    }

    .sidebar-container {
        display: grid;
        grid-template-columns: 75%% 25%%;
        gap: 30px;
    }

    .content, .sidebar {
        padding: 25px;
        border-radius: 8px;
        background-color: #fff;
        box-shadow: 0 2px 10px rgba(0,0,0,0.05);
    }

    .article-header {
        margin-bottom: 30px;
    }

    .article-title {
        font-family: "semiBoldW";
        font-size: 32px;
        color: #222;
        margin-bottom: 15px;
        line-height: 1.3;
    }

    .article-meta {
        display: flex;
        gap: 15px;
        color: #666;
        font-size: 14px;
        margin-bottom: 20px;
    }

    .featured-image {
        width: 100%%;
        height: auto;
        border-radius: 8px;
        margin: 20px 0;
        object-fit: cover;
    }

    .article-content h2 {
        font-family: "semiBoldW";
        font-size: 24px;
        margin: 25px 0 15px;
        color: #222;
    }

    .article-content h3 {
        font-family: "semiBoldW";
        font-size: 20px;
        margin: 20px 0 12px;
    }

    .article-content p {
        margin-bottom: 15px;
        font-size: 16px;
    }

    .article-content ul, .article-content ol {
        margin: 15px 0 15px 25px;
    }

    .article-content li {
        margin-bottom: 8px;
    }

    .image-caption {
        text-align: center;
        font-size: 14px;
        color: #666;
        margin-top: -15px;
        margin-bottom: 20px;
    }

    .cta-section {
        background-color: #f8f9fa;
        padding: 20px;
        border-radius: 8px;
        margin: 30px 0;
        text-align: center;
    }

    .sidebar-title {
        font-family: "semiBoldW";
        font-size: 20px;
        margin-bottom: 15px;
        padding-bottom: 10px;
        border-bottom: 1px solid #eee;
    }

    .related-post {
        margin-bottom: 15px;
        padding-bottom: 15px;
        border-bottom: 1px solid #eee;
    }

    .related-post:last-child {
        border-bottom: none;
    }

    .related-post a {
        color: #333;
        text-decoration: none;
        transition: color 0.3s;
    }

    .related-post a:hover {
        color: #0066cc;
    }

    .tags {
        display: flex;
        flex-wrap: wrap;
        gap: 8px;
        margin-top: 20px;
    }

    .tag {
        background-color: #f0f0f0;
        padding: 5px 10px;
        border-radius: 4px;
        font-size: 14px;
    }

    @media (max-width: 768px) {
        .sidebar-container {
            grid-template-columns: 1fr;
        }

        .article-title {
            font-size: 26px;
        }

        .article-content h2 {
            font-size: 22px;
        }
    }
""" % {"fonts": FONT_BASE_URL}
