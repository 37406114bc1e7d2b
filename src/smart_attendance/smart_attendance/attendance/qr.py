from __future__ import annotations

import base64
import io

import qrcode

DATA_URI_PREFIX = "data:image/png;base64,"


def encode_data_uri(data: str) -> str:
    """Render ``data`` as a PNG QR code and return it as a base64 data URI."""
    qr = qrcode.QRCode(
        version=1,
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        box_size=4,
        border=4,
    )
    qr.add_data(data)
    qr.make(fit=True)

    img = qr.make_image(fill_color="black", back_color="white")

    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return DATA_URI_PREFIX + base64.b64encode(buf.getvalue()).decode("ascii")
