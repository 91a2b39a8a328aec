"""GitLab directory cache backends."""
