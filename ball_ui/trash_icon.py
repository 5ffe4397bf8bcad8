from PIL import Image, ImageDraw

SCALE = 4
RESAMPLE = Image.Resampling.LANCZOS


def render_trash_icon(width: int, height: int, theme: dict) -> Image.Image:
    """Draws a trash can filling a width x height RGBA image with a transparent background."""
    w, h = max(1, int(width)) * SCALE, max(1, int(height)) * SCALE
    img = Image.new("RGBA", (w, h), (0, 0, 0, 0))
    draw = ImageDraw.Draw(img)

    body, lid, stripe = theme["can_body"], theme["can_lid"], theme["can_stripe"]
    m = w * 0.12
    lid_top = h * 0.10
    lid_h = h * 0.10
    handle_w = w * 0.22

    draw.rounded_rectangle(
        (w / 2 - handle_w / 2, lid_top - h * 0.06, w / 2 + handle_w / 2, lid_top + lid_h * 0.3),
        radius=SCALE * 3,
        outline=lid,
        width=SCALE * 3,
    )
    draw.rounded_rectangle((m * 0.6, lid_top, w - m * 0.6, lid_top + lid_h), radius=SCALE * 3, fill=lid)

    body_top = lid_top + lid_h + h * 0.03
    draw.polygon(
        [(m, body_top), (w - m, body_top), (w - m * 1.5, h - SCALE * 2), (m * 1.5, h - SCALE * 2)],
        fill=body,
    )
    for i in range(1, 4):
        x = m * 1.5 + (w - m * 3) * i / 4
        draw.line((x, body_top + h * 0.08, x, h - h * 0.1), fill=stripe, width=SCALE * 3)

    return img.resize((max(1, int(width)), max(1, int(height))), RESAMPLE)
