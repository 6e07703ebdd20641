"""Small command-line tools and helper libraries: counting, conversion, fetching, servers, images and compression."""

__version__ = "0.1.0"