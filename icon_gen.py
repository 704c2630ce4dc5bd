"""Generate the system-tray icon (64×64 PIL Image, in-memory)."""

from datetime import date

from PIL import Image, ImageDraw, ImageFont

from calendar_logic import GROUP_A_FG, GROUP_B_FG, WEEKEND_FG
from shift_logic import Group, assign_group

_ICON_COLORS = {
    Group.A: GROUP_A_FG,
    Group.B: GROUP_B_FG,
    None: WEEKEND_FG,
}


def create_icon_image(day: date | None = None) -> Image.Image:
    """Return a 64×64 RGBA image: today's group letter in white on the group colour."""
    size = 64
    group = assign_group(day or date.today())
    text = group.value if group is not None else "–"

    img = Image.new("RGBA", (size, size), (0, 0, 0, 0))
    draw = ImageDraw.Draw(img)
    draw.rounded_rectangle((0, 0, size - 1, size - 1), radius=10, fill=_ICON_COLORS[group])

    # Find the largest font size that fits the icon
    font_size = 56
    font = None
    while font_size > 10:
        try:
            font = ImageFont.truetype("DejaVuSans-Bold.ttf", font_size)
        except OSError:
            font = ImageFont.load_default()
            break
        bbox = draw.textbbox((0, 0), text, font=font)
        tw = bbox[2] - bbox[0]
        th = bbox[3] - bbox[1]
        if tw <= size - 12 and th <= size - 12:
            break
        font_size -= 1

    # Centre the actual visible pixels (compensate for font metric offsets)
    bbox = draw.textbbox((0, 0), text, font=font)
    x = (size - (bbox[2] - bbox[0])) / 2 - bbox[0]
    y = (size - (bbox[3] - bbox[1])) / 2 - bbox[1]
    draw.text((x, y), text, fill="white", font=font)

    return img
