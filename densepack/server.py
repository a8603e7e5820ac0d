"""
server.py

densepack HTTP API.
Exposes the codec over JSON endpoints so clients can encode number
sequences to compact text, decode them back and compare sizes.
"""

from datetime import datetime, timezone

from flask import Flask, jsonify, request

from .codec import compression_ratio, decode, encode, read_header, trivial_encoding
from .config_loader import load_config
from .errors import CodecError

# Flask app setup
app = Flask(__name__)

ENDPOINTS = ["/encode", "/decode", "/ratio", "/health"]


def _json_field(name):
    """Returns the named field of the JSON body, or None when absent."""
    if not request.is_json:
        print("❌ Request is not JSON")
        return None
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        print("❌ No JSON data received")
        return None
    return data.get(name)


@app.route("/encode", methods=["POST"])
def encode_numbers():
    """Encode a list of numbers (1-300) into compact text"""
    numbers = _json_field("numbers")
    if numbers is None:
        return jsonify({"error": "Missing fields"}), 400
    if not isinstance(numbers, list):
        return jsonify({"error": "numbers must be a list"}), 400

    try:
        encoded = encode(numbers)
        header = read_header(encoded)
        ratio = compression_ratio(numbers) if numbers else None
        print(f"🔧 encode: {len(numbers)} numbers -> {len(encoded)} chars")
        return jsonify({
            "encoded": encoded,
            "bit_width": header.bit_width,
            "count": header.count,
            "ratio": ratio,
        })
    except (CodecError, TypeError) as e:
        print(f"❌ encode rejected input: {e}")
        return jsonify({"error": str(e)}), 400
    except Exception as e:
        print(f"❌ Error in encode: {e}")
        return jsonify({"error": str(e)}), 500


@app.route("/decode", methods=["POST"])
def decode_text():
    """Decode compact text back into its list of numbers"""
    encoded = _json_field("encoded")
    if encoded is None:
        return jsonify({"error": "Missing fields"}), 400

    try:
        numbers = decode(encoded)
        header = read_header(encoded)
        print(f"🔧 decode: {len(encoded)} chars -> {len(numbers)} numbers")
        return jsonify({
            "numbers": numbers,
            "bit_width": header.bit_width,
            "count": header.count,
        })
    except (CodecError, TypeError) as e:
        print(f"❌ decode rejected input: {e}")
        return jsonify({"error": str(e)}), 400
    except Exception as e:
        print(f"❌ Error in decode: {e}")
        return jsonify({"error": str(e)}), 500


@app.route("/ratio", methods=["POST"])
def ratio():
    """Compare the encoded size with plain comma-separated text"""
    numbers = _json_field("numbers")
    if numbers is None:
        return jsonify({"error": "Missing fields"}), 400
    if not isinstance(numbers, list):
        return jsonify({"error": "numbers must be a list"}), 400

    try:
        value = compression_ratio(numbers)
        return jsonify({
            "ratio": value,
            "trivial_length": len(trivial_encoding(numbers)),
            "encoded_length": len(encode(numbers)),
        })
    except (ValueError, TypeError) as e:
        print(f"❌ ratio rejected input: {e}")
        return jsonify({"error": str(e)}), 400
    except Exception as e:
        print(f"❌ Error in ratio: {e}")
        return jsonify({"error": str(e)}), 500


@app.route("/health", methods=["GET"])
def health_check():
    """Health check endpoint"""
    return jsonify({
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "endpoints": ENDPOINTS,
    })


def main(config_path=None):
    config = load_config(config_path)
    server_config = config.get("server", {})
    host = server_config.get("host", "127.0.0.1")
    port = server_config.get("port", 5000)
    print(f"🚀 Starting densepack API on {host}:{port}")
    app.run(host=host, port=port, debug=server_config.get("debug", False))


if __name__ == "__main__":
    main()
