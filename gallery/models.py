from django.db import models


class ImageCategory(models.Model):
    name        = models.CharField(max_length=80, unique=True)
    description = models.TextField(blank=True, null=True)
    created_at  = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name_plural = 'Image Categories'
        ordering = ['name']

    def __str__(self):
        return self.name


class PortfolioImage(models.Model):
    """
    One image of the public portfolio.

    The files live on the CDN (Cloudinary); only their URLs are stored here.
    Rows are managed from the Django admin and are read-only for the site.
    """
    image_url      = models.URLField(max_length=500)
    thumbnail_url  = models.URLField(max_length=500, blank=True, null=True)
    title          = models.CharField(max_length=200, blank=True, null=True)
    alt            = models.CharField(max_length=255, blank=True, null=True)
    category       = models.ForeignKey(
                         ImageCategory,
                         on_delete=models.SET_NULL,
                         null=True, blank=True,
                         related_name='images',
                     )

    # Hero carousel selection
    is_featured    = models.BooleanField(default=False)
    featured_order = models.PositiveIntegerField(blank=True, null=True)

    order          = models.IntegerField(default=0)
    is_visible     = models.BooleanField(default=True)

    created_at     = models.DateTimeField(auto_now_add=True)
    updated_at     = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['order', 'created_at']

    @property
    def alt_text(self):
        return self.alt or self.title or 'Portfolio image'

    @property
    def display_url(self):
        """Grid cells prefer the thumbnail; the lightbox always uses image_url."""
        return self.thumbnail_url or self.image_url

    def __str__(self):
        return self.title or self.image_url
