"""Report presentation settings resolved from OmegaConf trees."""

from __future__ import annotations

from dataclasses import dataclass

from omegaconf import DictConfig

from crude_profiler.core.exceptions import ConfigurationError


@dataclass(slots=True, frozen=True)
class ReportConfig:
    """Resolved report layout configuration."""

    separator: str = ":"
    indent: str = "    "
    percent_precision: int = 1
    time_precision: int = 2
    max_labels: int | None = None

    def __post_init__(self) -> None:
        if not self.separator:
            raise ConfigurationError("report.separator must be a non-empty string.")
        if self.percent_precision < 0:
            raise ConfigurationError(
                f"report.percent_precision must be >= 0, got {self.percent_precision}."
            )
        if self.time_precision < 0:
            raise ConfigurationError(
                f"report.time_precision must be >= 0, got {self.time_precision}."
            )
        if self.max_labels is not None and self.max_labels <= 0:
            raise ConfigurationError(
                f"report.max_labels must be positive or null, got {self.max_labels}."
            )


def _as_int(value: object, key: str) -> int:
    try:
        return int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"report.{key} must be an integer, got {value!r}.") from exc


def _get(node: DictConfig, key: str, default: object) -> object:
    value = node.get(key, None)
    return default if value is None else value


def build_report_config(cfg: DictConfig | None) -> ReportConfig:
    """Resolve report config from a top-level Hydra config."""

    if cfg is None:
        return ReportConfig()
    report_cfg = cfg.get("report")
    if report_cfg is None:
        return ReportConfig()

    defaults = ReportConfig()
    raw_max_labels = report_cfg.get("max_labels", None)
    return ReportConfig(
        separator=str(_get(report_cfg, "separator", defaults.separator)),
        indent=str(_get(report_cfg, "indent", defaults.indent)),
        percent_precision=_as_int(
            _get(report_cfg, "percent_precision", defaults.percent_precision), "percent_precision"
        ),
        time_precision=_as_int(
            _get(report_cfg, "time_precision", defaults.time_precision), "time_precision"
        ),
        max_labels=None if raw_max_labels is None else _as_int(raw_max_labels, "max_labels"),
    )
