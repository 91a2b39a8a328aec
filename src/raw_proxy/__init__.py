"""raw-proxy: raw-file reverse proxy for GitHub, GitLab and Bitbucket."""

__version__ = "0.1.0"
