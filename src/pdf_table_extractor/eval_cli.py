from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from .evaluation import evaluate_tables, write_report

log = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Evalúa un CSV extraído contra una referencia y calcula la exactitud por celda."
    )
    parser.add_argument("--reference", required=True, help="CSV de referencia (ground truth).")
    parser.add_argument("--predicted", required=True, help="CSV generado por el extractor.")
    parser.add_argument("--report", help="Ruta opcional para guardar un reporte CSV con las métricas.")
    parser.add_argument("--json", help="Ruta opcional para guardar métricas en JSON.")
    parser.add_argument("--loglevel", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=args.loglevel, format="%(asctime)s - %(levelname)s - %(message)s")

    evaluation = evaluate_tables(reference_csv=args.reference, predicted_csv=args.predicted)

    log.info("Text accuracy: %.4f (%d/%d)", evaluation.text_accuracy, evaluation.matched_cells, evaluation.total_cells)
    log.info("Filas -> referencia: %d, extraídas: %d", evaluation.row_count_reference, evaluation.row_count_predicted)
    for metric in evaluation.per_column:
        log.info("Columna %d -> accuracy: %.4f (n=%d)", metric.column, metric.accuracy, metric.n)

    if args.report:
        write_report(evaluation, args.report)
        log.info("Reporte CSV guardado en %s", args.report)

    if args.json:
        Path(args.json).parent.mkdir(parents=True, exist_ok=True)
        with open(args.json, "w", encoding="utf-8") as fh:
            json.dump(evaluation.to_dict(), fh, indent=2)
        log.info("Reporte JSON guardado en %s", args.json)


if __name__ == "__main__":
    main()
