#!/usr/bin/env python3

"""
Debug script for countdown GIF rendering.
Run this script to render sample countdown GIFs with timing and memory information.
"""

import os
import sys
import time
import logging
import psutil
import traceback
import argparse
from pathlib import Path

# Configure logging
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout)
    ]
)

logger = logging.getLogger("countdown_debug")

DEFAULT_TEMPLATES = [
    "square",
    "square-digits",
    "square-border",
    "circle",
    "circle-border-inside",
    "rounded-sm",
    "rounded-md-border-inside",
    "rounded-lg-inside",
]

def setup_args():
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(description='Render sample countdown GIFs')
    parser.add_argument('--templates', type=str, nargs='+', default=DEFAULT_TEMPLATES,
                        help='Templates to render')
    parser.add_argument('--diff-ms', type=int, default=2 * 86400000 + 3723000,
                        help='Milliseconds remaining at the first frame')
    parser.add_argument('--font', type=str, default='Roboto', help='Font family')
    parser.add_argument('--no-days', action='store_true', help='Hide the days box')
    parser.add_argument('--no-hours', action='store_true', help='Hide the hours box')
    parser.add_argument('--output-dir', type=str, default='debug_output', help='Directory for the GIFs')
    parser.add_argument('--font-dir', type=str, default=None, help='Font directory to register')
    return parser.parse_args()

def monitor_process():
    """Monitor the current process for memory usage"""
    process = psutil.Process()
    memory_mb = process.memory_info().rss / 1024 / 1024
    logger.info(f"Memory usage: {memory_mb:.2f} MB")
    return memory_mb

def render_samples(args):
    """
    Render one GIF per template into the output directory
    """
    # Import where needed so logging is configured first
    from app.models import CountdownConfig
    from app.services.countdown import CountdownRenderer, register_fonts, RenderError

    register_fonts(args.font_dir)

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    logger.info(f"Writing GIFs to {output_dir.resolve()}")

    failures = 0
    for template in args.templates:
        config = CountdownConfig(
            template=template,
            font=args.font,
            display_days=not args.no_days,
            display_hours=not args.no_hours,
        )

        start_memory = monitor_process()
        start_time = time.time()
        try:
            data = CountdownRenderer(config).render_gif(args.diff_ms)
        except RenderError as e:
            logger.error(f"Failed to render {template}: {e.message}")
            failures += 1
            continue

        path = output_dir / f"countdown_{template}.gif"
        path.write_bytes(data)

        elapsed = time.time() - start_time
        memory_delta = monitor_process() - start_memory
        logger.info(f"{template}: {len(data)} bytes in {elapsed:.2f}s (memory delta {memory_delta:+.2f} MB) -> {path}")

    return failures

def main():
    args = setup_args()
    logger.info(f"Python version: {sys.version}")
    logger.info(f"Working directory: {os.getcwd()}")
    try:
        failures = render_samples(args)
    except Exception as e:
        logger.error(f"Debug rendering failed: {str(e)}")
        logger.error(traceback.format_exc())
        return 1
    return 1 if failures else 0

if __name__ == "__main__":
    sys.exit(main())
