from __future__ import annotations

import argparse
import logging
import sys

from .config import DEFAULT_X_THRESHOLD, DEFAULT_Y_THRESHOLD, ExtractionConfig
from .errors import TableExtractionError
from .main import hocr_to_csv, pdf_to_csv

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Reconstruir tablas desde la capa de texto de un PDF (o HOCR) a CSV.")
    parser.add_argument("csv_path", type=str, help="Ruta al archivo de salida .csv")
    parser.add_argument("--input", required=True, type=str, help="Ruta al documento de entrada (.pdf o .hocr)")
    parser.add_argument("--format", type=str, default="pdf", choices=["pdf", "hocr"],
                        help="Tipo de documento de entrada (default: pdf)")
    parser.add_argument("--x-threshold", type=float, default=DEFAULT_X_THRESHOLD,
                        help="Hueco horizontal máximo para fusionar fragmentos (default: %(default)s)")
    parser.add_argument("--y-threshold", type=float, default=DEFAULT_Y_THRESHOLD,
                        help="Tamaño de cubeta vertical para agrupar filas (default: %(default)s)")
    parser.add_argument("--workers", type=int, default=1, help="Hilos para procesar páginas (default: 1)")
    parser.add_argument("--bbox", type=int, nargs=4, metavar=('X1', 'Y1', 'X2', 'Y2'),
                        help="Bbox opcional de la tabla (solo HOCR): x1 y1 x2 y2")
    parser.add_argument("--loglevel", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Nivel de verbosidad del log (default: INFO)")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.bbox and args.format != "hocr":
        parser.error("--bbox solo se admite con --format hocr")

    logging.basicConfig(level=args.loglevel, format='%(asctime)s - %(levelname)s - %(message)s')
    log.info("ENTRADA: %s", args.input)
    log.info("CSV : %s", args.csv_path)

    try:
        config = ExtractionConfig(
            x_threshold=args.x_threshold,
            y_threshold=args.y_threshold,
            workers=args.workers,
        )
    except ValueError as e:
        parser.error(str(e))

    try:
        if args.format == "hocr":
            hocr_to_csv(args.input, args.csv_path, config,
                        table_bbox=tuple(args.bbox) if args.bbox else None)
        else:
            pdf_to_csv(args.input, args.csv_path, config)
    except FileNotFoundError:
        log.error("Error: No se encontró el archivo de entrada: %s", args.input)
        return 1
    except TableExtractionError as e:
        log.error("No se pudo leer el documento: %s", e)
        return 1
    log.info("✔ Proceso completado.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
