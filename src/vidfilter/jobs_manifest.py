"""Jobs manifest loader — batch filtering of several videos from YAML.

Jobs manifest schema:
  paths:
    raw: "/data/recordings"
    out: "/data/clean"
  force: false                     # optional, default for every job
  jobs:
    - source: "${raw}/ep01.mp4"
      filter: "${raw}/ep01.filter"
      output: "${out}/ep01.mp4"
      force: true                  # optional per-job override
"""

from pathlib import Path

import yaml

from .common import resolve_path_vars

REQUIRED_JOB_FIELDS = ("source", "filter", "output")


def load_jobs_manifest(manifest_path: str | Path) -> dict:
    """Load, validate, and normalize a jobs manifest.

    Processing pipeline:
      1. Parse YAML.
      2. Resolve ${path} variables in source, filter and output.
      3. Apply the global force default to each job.
      4. Check for duplicate outputs.

    Args:
        manifest_path: Path to the YAML jobs manifest.

    Returns:
        Normalized config dict: {"jobs": [{"source", "filter", "output", "force"}]}.

    Raises:
        ValueError: Missing/invalid fields.
    """
    with open(manifest_path) as f:
        raw = yaml.safe_load(f)

    if not isinstance(raw, dict):
        raise ValueError("Jobs manifest: top level must be a mapping")
    if "jobs" not in raw:
        raise ValueError("Jobs manifest: missing required 'jobs' field")
    if not isinstance(raw["jobs"], list):
        raise ValueError("Jobs manifest: 'jobs' must be a list")

    paths = raw.get("paths") or {}
    default_force = bool(raw.get("force", False))

    jobs = []
    seen_outputs = set()
    for i, job in enumerate(raw["jobs"]):
        if not isinstance(job, dict):
            raise ValueError(f"Job {i}: must be a mapping")
        for key in REQUIRED_JOB_FIELDS:
            if key not in job:
                raise ValueError(f"Job {i}: missing required field '{key}'")

        resolved = {
            key: resolve_path_vars(str(job[key]), paths)
            for key in REQUIRED_JOB_FIELDS
        }
        if resolved["output"] in seen_outputs:
            raise ValueError(f"Job {i}: duplicate output '{resolved['output']}'")
        seen_outputs.add(resolved["output"])

        resolved["force"] = bool(job.get("force", default_force))
        jobs.append(resolved)

    return {"jobs": jobs}


def validate_job_paths(config: dict) -> None:
    """Check that every job's source video and filter file exist.

    Raises:
        FileNotFoundError: On the first missing file.
    """
    for job in config["jobs"]:
        if not Path(job["source"]).exists():
            raise FileNotFoundError(f"Source video not found: {job['source']}")
        if not Path(job["filter"]).exists():
            raise FileNotFoundError(f"Filter file not found: {job['filter']}")
