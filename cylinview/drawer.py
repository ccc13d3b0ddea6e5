"""Primitive drawing on the wrapping ring of panels."""

from __future__ import annotations

from .screen import Color


def _trunc_div(a, b):
    """Integer division that rounds toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


class CyclicMonoDrawer:
    """Draws dots, lines, shapes and images onto a cyclic screen.

    Horizontal coordinates are not clipped: the screen wraps them around
    the ring. Vertical coordinates outside the screen are dropped.
    """

    def __init__(self, screen):
        self.screen = screen

    @property
    def width(self):
        return self.screen.width

    @property
    def height(self):
        return self.screen.height

    def clear_frame(self, color=Color.BLACK):
        """Fill the whole screen with *color*."""
        self.screen.clear(color)

    def get_dot(self, x, y):
        """Return the colour of the dot at (x, y)."""
        return self.screen.get_dot(x, y)

    def draw_dot(self, x, y, color=Color.WHITE):
        """Set one dot."""
        self.screen.set_dot(x, y, color)

    def draw_hline(self, x1, x2, y, color=Color.WHITE):
        """Draw a horizontal line from x1 to x2, both ends included."""
        if not 0 <= y < self.height:
            return
        if x1 > x2:
            x1, x2 = x2, x1
        for x in range(x1, x2 + 1):
            self.draw_dot(x, y, color)

    def draw_vline(self, x, y1, y2, color=Color.WHITE):
        """Draw a vertical line from y1 to y2, clipped to the screen height."""
        height = self.height
        if (y1 < 0 and y2 < 0) or (y1 >= height and y2 >= height):
            return
        if y1 > y2:
            y1, y2 = y2, y1
        y1 = max(y1, 0)
        y2 = min(y2, height - 1)
        for y in range(y1, y2 + 1):
            self.draw_dot(x, y, color)

    def draw_line(self, x1, y1, x2, y2, color=Color.WHITE):
        """Draw a straight line between two points (Bresenham)."""
        xinc1 = xinc2 = 1 if x2 >= x1 else -1
        yinc1 = yinc2 = 1 if y2 >= y1 else -1
        deltax = abs(x2 - x1)
        deltay = abs(y2 - y1)
        if deltax >= deltay:
            xinc1 = 0
            yinc2 = 0
            den, num, numadd, numpixels = deltax, deltax // 2, deltay, deltax
        else:
            xinc2 = 0
            yinc1 = 0
            den, num, numadd, numpixels = deltay, deltay // 2, deltax, deltay

        x, y = x1, y1
        for _ in range(numpixels + 1):
            self.draw_dot(x, y, color)
            num += numadd
            if num >= den:
                num -= den
                x += xinc1
                y += yinc1
            x += xinc2
            y += yinc2

    def draw_rect(self, x1, y1, x2, y2, color=Color.WHITE, fill=False):
        """Draw a rectangle outline, or a filled one when *fill* is true."""
        if fill:
            self.draw_rect_fill(x1, y1, x2, y2, color)
        else:
            self._draw_rect_outline(x1, y1, x2, y2, color)

    def _draw_rect_outline(self, x1, y1, x2, y2, color):
        self.draw_hline(x1, x2, y1, color)
        self.draw_hline(x1, x2, y2, color)
        self.draw_vline(x1, y1, y2, color)
        self.draw_vline(x2, y1, y2, color)

    def draw_rect_fill(self, x1, y1, x2, y2, color=Color.WHITE):
        """Draw a filled rectangle."""
        if y1 > y2:
            y1, y2 = y2, y1
        for y in range(y1, y2 + 1):
            self.draw_hline(x1, x2, y, color)

    def _scan_lines(self, l_x, l_a, r_x, r_a, sy, ey, color):
        last_x = self.width - 1
        while sy < ey:
            sx = 0 if l_x < 0 else int(l_x + 0.5)
            ex = min(int(r_x + 0.5), last_x)
            self.draw_hline(sx, ex, sy, color)
            l_x += l_a
            r_x += r_a
            sy += 1
        return l_x, r_x, sy

    def draw_triangle_fill(self, x1, y1, x2, y2, x3, y3, color=Color.WHITE):
        """Draw a filled triangle."""
        (top_x, top_y), (mid_x, mid_y), (btm_x, btm_y) = sorted(
            [(x1, y1), (x2, y2), (x3, y3)], key=lambda point: point[1]
        )
        height = self.height
        if top_y >= height or btm_y < 0:
            return

        top_mid_x = float(top_x)
        top_btm_x = float(top_x)
        if top_y == mid_y:
            top_mid_x = float(mid_x)

        sy, my, ey = top_y, mid_y, btm_y

        if top_y < 0:
            sy = 0
            if mid_y >= 0:
                if top_y != mid_y:
                    top_mid_x = (mid_x - top_x) * mid_y / (top_y - mid_y) + mid_x
            elif mid_y != btm_y:
                top_mid_x = (btm_x - mid_x) * btm_y / (mid_y - btm_y) + btm_x
            if top_y != btm_y:
                top_btm_x = (btm_x - top_x) * btm_y / (top_y - btm_y) + btm_x

        if btm_y >= height:
            ey = height - 1

        top_mid_a = (mid_x - top_x) / (mid_y - top_y) if mid_y != top_y else 0.0
        mid_btm_a = (mid_x - btm_x) / (mid_y - btm_y) if mid_y != btm_y else 0.0
        top_btm_a = (top_x - btm_x) / (top_y - btm_y) if top_y != btm_y else 0.0

        if top_y != btm_y:
            split_x = _trunc_div((top_x - btm_x) * (mid_y - top_y), top_y - btm_y) + top_x
        else:
            split_x = btm_x

        mid_on_left = mid_x < split_x
        if mid_on_left:
            l_x, l_a, r_x, r_a = top_mid_x, top_mid_a, top_btm_x, top_btm_a
        else:
            l_x, l_a, r_x, r_a = top_btm_x, top_btm_a, top_mid_x, top_mid_a

        l_x, r_x, sy = self._scan_lines(l_x, l_a, r_x, r_a, sy, my, color)
        if mid_on_left:
            l_a = mid_btm_a
        else:
            r_a = mid_btm_a
        self._scan_lines(l_x, l_a, r_x, r_a, sy, ey + 1, color)

    def draw_triangle(self, x1, y1, x2, y2, x3, y3, color=Color.WHITE):
        """Draw a triangle outline."""
        self.draw_line(x1, y1, x2, y2, color)
        self.draw_line(x1, y1, x3, y3, color)
        self.draw_line(x2, y2, x3, y3, color)

    @staticmethod
    def _circle_points(radius):
        x = radius - 1
        y = 0
        dx = 1
        dy = 1
        err = dx - (radius << 1)
        while x >= y:
            yield x, y
            if err <= 0:
                y += 1
                err += dy
                dy += 2
            if err > 0:
                x -= 1
                dx += 2
                err += dx - (radius << 1)

    def draw_circle(self, x0, y0, radius, color=Color.WHITE):
        """Draw a circle outline (midpoint algorithm)."""
        for x, y in self._circle_points(radius):
            for px, py in (
                (x0 + x, y0 + y), (x0 + y, y0 + x), (x0 - y, y0 + x), (x0 - x, y0 + y),
                (x0 - x, y0 - y), (x0 - y, y0 - x), (x0 + y, y0 - x), (x0 + x, y0 - y),
            ):
                self.draw_dot(px, py, color)

    def draw_circle_fill(self, x0, y0, radius, color=Color.WHITE):
        """Draw a filled circle."""
        for x, y in self._circle_points(radius):
            self.draw_hline(x0 - x, x0 + x, y0 + y, color)
            self.draw_hline(x0 - x, x0 + x, y0 - y, color)
            self.draw_vline(x0 - y, y0 - x, y0 + x, color)
            self.draw_vline(x0 + y, y0 - x, y0 + x, color)

    def draw_image(self, x, y, image, blend=False, centered=False, offset=False):
        """Draw *image* with its top-left corner at (x, y).

        *centered* places the image's centre at (x, y), *offset* shifts it
        by the image's own draw offset, and *blend* skips the transparent
        dots of an image that has an alpha mask.
        """
        if centered:
            x -= image.width // 2
            y -= image.height // 2
        if offset:
            x += image.draw_offset_x
            y += image.draw_offset_y
        use_alpha = blend and image.has_alpha
        for iy in range(image.height):
            for ix in range(image.width):
                if use_alpha and not image.get_dot_alpha(ix, iy):
                    continue
                self.draw_dot(x + ix, y + iy, Color(image.get_dot(ix, iy)))