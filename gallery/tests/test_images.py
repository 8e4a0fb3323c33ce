from django.test import SimpleTestCase

from gallery.images import optimized_url, srcset

CLOUDINARY = 'https://res.cloudinary.com/demo/image/upload/v1712/portfolio/wedding.jpg'


class OptimizedUrlTest(SimpleTestCase):
    """Test Cloudinary transformation injection."""

    def test_transformation_inserted_after_upload(self):
        """Test the transformation segment lands right after /upload/."""
        url = optimized_url(CLOUDINARY, width=640)
        head, tail = url.split('/upload/', 1)
        transformation, rest = tail.split('/', 1)

        self.assertEqual(head, 'https://res.cloudinary.com/demo/image')
        self.assertEqual(rest, 'v1712/portfolio/wedding.jpg')
        for part in ('w_640', 'c_fill', 'q_auto', 'f_auto'):
            self.assertIn(part, transformation.split(','))

    def test_height_and_crop(self):
        """Test optional height and crop are passed through."""
        url = optimized_url(CLOUDINARY, width=300, height=200, crop='thumb')
        self.assertIn('h_200', url)
        self.assertIn('c_thumb', url)

    def test_foreign_url_unchanged(self):
        """Test non-Cloudinary URLs are returned untouched."""
        url = 'https://images.example.com/upload/photo.jpg'
        self.assertEqual(optimized_url(url, width=640), url)

    def test_cloudinary_url_without_upload_unchanged(self):
        """Test Cloudinary URLs without an /upload/ segment are untouched."""
        url = 'https://res.cloudinary.com/demo/image/fetch/photo.jpg'
        self.assertEqual(optimized_url(url, width=640), url)

    def test_empty_url(self):
        """Test empty values pass straight through."""
        self.assertEqual(optimized_url(''), '')
        self.assertIsNone(optimized_url(None))


class SrcsetTest(SimpleTestCase):
    """Test responsive srcset generation."""

    def test_default_widths(self):
        """Test one candidate per default width, each with its descriptor."""
        candidates = srcset(CLOUDINARY).split(', ')
        self.assertEqual(len(candidates), 5)
        self.assertTrue(candidates[0].endswith(' 640w'))
        self.assertIn('w_640', candidates[0])
        self.assertTrue(candidates[-1].endswith(' 1536w'))

    def test_custom_widths(self):
        """Test custom widths are honoured."""
        self.assertEqual(len(srcset(CLOUDINARY, widths=(400, 800)).split(', ')), 2)

    def test_foreign_url_has_no_srcset(self):
        """Test non-Cloudinary URLs get an empty srcset."""
        self.assertEqual(srcset('https://example.com/a.jpg'), '')
