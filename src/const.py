"""Constants shared across the FIX checksum tooling."""

SOH = "\x01"
SOH_BYTE = b"\x01"

CHECKSUM_TAG = "10="
# SOH anchor keeps tags such as 210= from matching
CHECKSUM_FIELD_PREFIX = SOH_BYTE + CHECKSUM_TAG.encode("ascii")
CHECKSUM_WIDTH = 3
CHECKSUM_MODULUS = 256

DISPLAY_DELIMITER = "|"
DEFAULT_ENCODING = "utf-8"

TEST_RESULTS_FOLDER = "results"
DEFAULT_CONFIG_FILENAME = "check_config.json"
