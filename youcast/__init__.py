"""Turn a YouTube channel into an audio podcast feed."""
