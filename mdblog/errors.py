class PostsError(Exception):
    """Base class for content pipeline errors."""


class PostValidationError(PostsError):
    """A post is missing a required front matter field (strict mode only)."""

    def __init__(self, filename: str, missing):
        self.filename = filename
        self.missing = list(missing)
        super().__init__(
            f"Missing required fields in {filename}: {', '.join(self.missing)}"
        )


class PostReadError(PostsError):
    pass


class PostReadTimeout(PostReadError):
    pass


class PostReadCancelled(PostsError):
    pass
