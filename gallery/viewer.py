"""
Gallery viewer: category filtering plus a keyboard-driven lightbox.

The viewer never mutates the images it is given; `filtered_images` is
derived from the source set and the selected category on every read.

Lightbox invariant: while an image is open, `open_index` points at it
inside `filtered_images`.  When a category switch removes the open image
from the view the lightbox closes; when the image survives, the index is
re-resolved to its new position.
"""
from collections import namedtuple

ALL = 'all'

KEY_CLOSE    = 'Escape'
KEY_PREVIOUS = 'ArrowLeft'
KEY_NEXT     = 'ArrowRight'


# ─── Scroll lock ──────────────────────────────────────────────────────────────

class ScrollLock:
    """
    Document-level scroll suspension held while a lightbox is open.

    There is one flag, not a counter: acquiring an already held lock is a
    no-op and a single release frees it.
    """

    def __init__(self):
        self._held = False

    @property
    def locked(self):
        return self._held

    @property
    def overflow(self):
        """CSS value the page body should carry."""
        return 'hidden' if self._held else 'unset'

    def acquire(self):
        self._held = True

    def release(self):
        self._held = False

    def __enter__(self):
        self.acquire()
        return self

    def __exit__(self, *exc_info):
        self.release()
        return False


# Shared by every viewer that is not given its own lock.
document_scroll = ScrollLock()


# ─── Navigation ───────────────────────────────────────────────────────────────

def wrap_previous(index, count):
    return index - 1 if index > 0 else count - 1


def wrap_next(index, count):
    return index + 1 if index < count - 1 else 0


# ─── Layout ───────────────────────────────────────────────────────────────────

GridLayout = namedtuple('GridLayout', ['variant', 'columns', 'centered'])
CellSpan   = namedtuple('CellSpan', ['columns', 'rows'])

FEATURE_FIRST_CELL_FROM = 6


def grid_layout(count):
    """
    Column count per breakpoint for a grid of `count` images.

    Breakpoints follow the frontend: `base` (mobile), `md` and `lg`.
    """
    if count <= 0:
        return GridLayout('empty', {}, False)
    if count == 1:
        return GridLayout('single', {'base': 1}, True)
    if count == 2:
        return GridLayout('pair', {'base': 1, 'md': 2}, False)
    if count == 3:
        return GridLayout('triple', {'base': 1, 'md': 2, 'lg': 3}, False)
    return GridLayout('grid', {'base': 2, 'md': 3, 'lg': 4}, False)


def cell_span(index, count):
    if count == 1:
        return CellSpan(1, 2)
    if index == 0 and count >= FEATURE_FIRST_CELL_FROM:
        return CellSpan(2, 2)
    return CellSpan(1, 1)


# ─── Viewer ───────────────────────────────────────────────────────────────────

class GalleryViewer:
    """
    State of one mounted gallery.

    `images` are any objects exposing `category_id`; `categories` expose
    `id` and `name` and are only used for labels.
    """

    def __init__(self, images, categories=(), scroll_lock=None):
        self.images            = tuple(images)
        self.categories        = tuple(categories)
        self.scroll_lock       = scroll_lock if scroll_lock is not None else document_scroll
        self.selected_category = ALL
        self.open_image        = None
        self.open_index        = None

    # ── Filtering ─────────────────────────────────────────────────────────────

    @property
    def filtered_images(self):
        if self.selected_category == ALL:
            return self.images
        return tuple(
            image for image in self.images
            if image.category_id == self.selected_category
        )

    def set_category(self, category_id):
        self.selected_category = category_id
        if self.open_image is None:
            return

        filtered = self.filtered_images
        if self.open_image in filtered:
            self.open_index = filtered.index(self.open_image)
        else:
            self.close()

    def category_label(self, category_id=None):
        if category_id is None:
            category_id = self.selected_category
        if category_id == ALL:
            return 'ALL'
        for category in self.categories:
            if category.id == category_id:
                return category.name.upper()
        return str(category_id).upper()

    @property
    def counts(self):
        """(shown, total) for the "showing X of Y" counter."""
        return len(self.filtered_images), len(self.images)

    @property
    def layout(self):
        return grid_layout(len(self.filtered_images))

    # ── Lightbox ──────────────────────────────────────────────────────────────

    @property
    def is_open(self):
        return self.open_image is not None

    def open_at(self, image, index):
        filtered = self.filtered_images
        if not 0 <= index < len(filtered) or filtered[index] != image:
            raise ValueError(f'Image is not at position {index} of the current view.')

        self.open_image = image
        self.open_index = index
        self.scroll_lock.acquire()

    def close(self):
        self.open_image = None
        self.open_index = None
        self.scroll_lock.release()

    def previous(self):
        return self._move(wrap_previous)

    def next(self):
        return self._move(wrap_next)

    def _move(self, step):
        if not self.is_open:
            return None
        filtered = self.filtered_images
        if len(filtered) > 1:
            self.open_index = step(self.open_index, len(filtered))
            self.open_image = filtered[self.open_index]
        return self.open_image

    @property
    def position_label(self):
        count = len(self.filtered_images)
        if not self.is_open or count <= 1:
            return ''
        return f'{self.open_index + 1} / {count}'

    def handle_key(self, key):
        """Returns True when the key was consumed by the open lightbox."""
        if not self.is_open:
            return False

        actions = {
            KEY_CLOSE:    self.close,
            KEY_PREVIOUS: self.previous,
            KEY_NEXT:     self.next,
        }
        action = actions.get(key)
        if action is None:
            return False
        action()
        return True

    # ── Teardown ──────────────────────────────────────────────────────────────

    def dispose(self):
        self.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.dispose()
        return False
