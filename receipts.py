from PIL import Image, ImageDraw, ImageFont
import math
import os
from datetime import datetime
from decimal import Context, Decimal, ROUND_HALF_EVEN

RECEIPT_RULE = "-" * 46
_CENTS = Decimal("0.01")
# wide enough for every finite float plus two decimals
_AMOUNT_CONTEXT = Context(prec=400)


def format_amount(value):
    """Format with at most two decimals, dropping trailing zeros: 15.0 -> '15', 2.50 -> '2.5'."""
    if not math.isfinite(value):
        return str(value)
    # half-even on the exact binary value of the float
    rounded = Decimal(value).quantize(_CENTS, rounding=ROUND_HALF_EVEN, context=_AMOUNT_CONTEXT)
    text = format(rounded, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text


def _row(name, price, quantity):
    return f"{name!s:<20} {price!s:<10} {quantity!s:<10}"


def receipt_text(receipt):
    out = ["Receipt:", "", _row("Name", "Price", "Quantity"), RECEIPT_RULE]
    for line in receipt.lines:
        out.append(_row(line.name, format_amount(line.price), line.quantity))
    out.append(RECEIPT_RULE)
    out.append(f"Total: ${format_amount(receipt.total)}")
    return "\n".join(out) + "\n"


def new_receipt_number(now=None):
    now = now or datetime.now()
    return f"R-{now.strftime('%Y%m%d-%H%M%S')}-{now.microsecond:06d}"


class ReceiptGenerator:
    @staticmethod
    def _load_font(size):
        # Try common system fonts, fallback to default
        candidates = ["DejaVuSansMono.ttf", "LiberationMono-Regular.ttf", "cour.ttf"]
        for f in candidates:
            try:
                return ImageFont.truetype(f, size)
            except OSError:
                continue
        return ImageFont.load_default()

    @staticmethod
    def _text_width(draw, text, font):
        bbox = draw.textbbox((0, 0), text, font=font)
        return bbox[2] - bbox[0]

    @staticmethod
    def generate(receipt, receipts_dir, receipt_number=None):
        """Render the receipt to `<receipts_dir>/<receipt_number>.png` and return the path."""
        receipt_number = receipt_number or new_receipt_number()
        os.makedirs(receipts_dir, exist_ok=True)
        png_path = os.path.join(receipts_dir, f"{receipt_number}.png")

        width = 560
        line_h = 22
        x = 24
        header_h = 110
        footer_h = 70
        height = header_h + line_h * max(1, len(receipt.lines)) + footer_h

        img = Image.new('RGB', (width, height), color=(255, 255, 255))
        draw = ImageDraw.Draw(img)
        f_head = ReceiptGenerator._load_font(22)
        f_body = ReceiptGenerator._load_font(14)

        # amounts are right-aligned against these edges
        col_total_right = width - x
        col_price_right = col_total_right - 110
        col_qty_right = col_price_right - 90

        y = 20
        draw.text((x, y), "Receipt", font=f_head, fill=(20, 20, 20))
        y += 32
        draw.text((x, y), f"No. {receipt_number}", font=f_body, fill=(60, 60, 60))
        y += 26

        for label, right in (("Qty", col_qty_right), ("Price", col_price_right), ("Total", col_total_right)):
            draw.text((right - ReceiptGenerator._text_width(draw, label, f_body), y), label,
                      font=f_body, fill=(0, 0, 0))
        draw.text((x, y), "Name", font=f_body, fill=(0, 0, 0))
        y += line_h
        draw.line((x, y - 4, width - x, y - 4), fill=(200, 200, 200), width=1)

        for line in receipt.lines:
            draw.text((x, y), str(line.name), font=f_body, fill=(20, 20, 20))
            cells = (
                (str(line.quantity), col_qty_right),
                (format_amount(line.price), col_price_right),
                (format_amount(line.line_total), col_total_right),
            )
            for text, right in cells:
                draw.text((right - ReceiptGenerator._text_width(draw, text, f_body), y), text,
                          font=f_body, fill=(20, 20, 20))
            y += line_h

        y = height - footer_h + 10
        draw.line((x, y, width - x, y), fill=(200, 200, 200), width=1)
        y += 12
        total_txt = f"Total: ${format_amount(receipt.total)}"
        draw.text((col_total_right - ReceiptGenerator._text_width(draw, total_txt, f_head), y),
                  total_txt, font=f_head, fill=(0, 100, 0))

        img.save(png_path)
        return png_path
