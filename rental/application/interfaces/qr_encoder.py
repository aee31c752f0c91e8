class QrCodeEncoder:
    def encode(self, content: str) -> str:
        """Render content as a QR image and return it base64 encoded."""
        raise NotImplementedError
