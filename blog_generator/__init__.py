"""Static blog post generator: chat-completion content + Pexels images.

Package structure:
    blog_generator/config.py       – paths, API keys, model settings
    blog_generator/errors.py       – configuration, upstream and parse errors
    blog_generator/pipeline/       – content fetch, image fetch, merge (generate_blog_post)
    blog_generator/render/         – fixed HTML template
    blog_generator/output.py       – slugs and writing the page to disk
    blog_generator/validation/     – advisory checks on the rendered page
"""
