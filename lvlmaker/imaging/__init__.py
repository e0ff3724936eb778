from lvlmaker.imaging.decoder import decode_image, decode_image_bytes

__all__ = ["decode_image", "decode_image_bytes"]
