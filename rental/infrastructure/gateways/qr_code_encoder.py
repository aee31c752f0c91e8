import base64
import io

import segno

from rental.application.interfaces.qr_encoder import QrCodeEncoder


class SegnoQrCodeEncoder(QrCodeEncoder):
    """PNG QR codes rendered with segno, quartile error correction."""

    def __init__(self, scale: int = 10, border: int = 4) -> None:
        self._scale = scale
        self._border = border

    def encode(self, content: str) -> str:
        qr = segno.make(content, error="q")
        buffer = io.BytesIO()
        qr.save(buffer, kind="png", scale=self._scale, border=self._border)
        return base64.b64encode(buffer.getvalue()).decode("ascii")
