"""Blog generation: content fetch, image fetch, merge and render."""

from blog_generator.pipeline.generator import assign_images, generate_blog_post

__all__ = ["assign_images", "generate_blog_post"]
