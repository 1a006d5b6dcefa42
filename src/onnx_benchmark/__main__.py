"""
Allow running the benchmark with ``python -m onnx_benchmark``.
"""

from .cli import main

if __name__ == "__main__":
    main()
