"""
Cloudinary delivery URLs.

Portfolio rows store the plain upload URL; these helpers splice a
transformation segment in after `/upload/` so the CDN serves a resized,
auto-format, auto-quality variant.
"""
from cloudinary.utils import generate_transformation_string

UPLOAD_MARKER   = '/upload/'
SRCSET_WIDTHS   = (640, 768, 1024, 1280, 1536)


def is_cloudinary_url(url):
    return bool(url) and 'cloudinary.com' in url


def optimized_url(url, width=None, height=None, quality='auto', fetch_format='auto', crop='fill'):
    if not is_cloudinary_url(url):
        return url

    position = url.find(UPLOAD_MARKER)
    if position == -1:
        return url

    transformation, _ = generate_transformation_string(
        width=width,
        height=height,
        crop=crop,
        quality=quality,
        fetch_format=fetch_format,
    )
    split = position + len(UPLOAD_MARKER)
    return f'{url[:split]}{transformation}/{url[split:]}'


def srcset(url, widths=SRCSET_WIDTHS, **options):
    if not is_cloudinary_url(url):
        return ''
    return ', '.join(
        f'{optimized_url(url, width=width, **options)} {width}w' for width in widths
    )
