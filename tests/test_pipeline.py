"""End-to-end tests for a generation run."""

import pytest

from svelte_icons.errors import IdentifierCollisionError
from svelte_icons.pipeline import run_generation

from conftest import GITHUB_PATH


def export_lines(text):
    return [line for line in text.splitlines() if line.startswith("export {")]


def snapshot(directory):
    return {p.relative_to(directory).as_posix(): p.read_bytes() for p in sorted(directory.rglob("*")) if p.is_file()}


class TestRunGeneration:
    def test_single_icon_scenario(self, write_source, make_config):
        source = write_source({"siPrefix": "si", "siGithub": {"title": "GitHub", "path": GITHUB_PATH}})
        config = make_config(source)
        result = run_generation(config)

        assert result.identifiers == ["SiGithub"]
        assert result.count == 1
        files = sorted(p.name for p in config.output_dir.iterdir())
        assert files == ["SiGithub.svelte"]

        content = (config.output_dir / "SiGithub.svelte").read_text(encoding="utf-8")
        assert 'title = "GitHub"' in content
        assert content.count(GITHUB_PATH) == 1

        manifest = result.manifest_path.read_text(encoding="utf-8")
        assert "export type SiComponentProps" in manifest
        assert export_lines(manifest) == ["export { default as SiGithub } from './icons/SiGithub.svelte';"]

    def test_entry_without_title_excluded(self, write_source, make_config, dataset):
        dataset["siNotitle"] = {"path": "M0 0h24v24H0z"}
        config = make_config(write_source(dataset))
        result = run_generation(config)

        assert result.count == 2
        assert not (config.output_dir / "SiNotitle.svelte").exists()
        assert "SiNotitle" not in result.manifest_path.read_text(encoding="utf-8")

    def test_export_count_matches_valid_records(self, write_source, make_config, dataset):
        dataset["siBroken"] = {"title": "Broken"}
        result = run_generation(make_config(write_source(dataset)))
        assert len(export_lines(result.manifest_path.read_text(encoding="utf-8"))) == 2

    def test_idempotent(self, tmp_path, write_source, make_config, dataset):
        config = make_config(write_source(dataset))
        run_generation(config)
        first = snapshot(config.lib_dir)
        run_generation(config)
        assert snapshot(config.lib_dir) == first

    def test_removed_record_drops_export(self, write_source, make_config, dataset):
        source = write_source(dataset)
        config = make_config(source)
        run_generation(config)

        del dataset["siGitlab"]
        write_source(dataset)
        result = run_generation(config)

        assert result.identifiers == ["SiGithub"]
        assert "SiGitlab" not in result.manifest_path.read_text(encoding="utf-8")
        # stale component is left for the external clean step
        assert (config.output_dir / "SiGitlab.svelte").exists()

    def test_empty_source(self, tmp_path, make_config):
        config = make_config(tmp_path / "missing.json")
        result = run_generation(config)
        assert result.identifiers == []
        assert list(config.output_dir.iterdir()) == []
        manifest = config.manifest_path.read_text(encoding="utf-8")
        assert "export type SiComponentProps" in manifest
        assert export_lines(manifest) == []

    def test_collision_aborts_before_writing(self, write_source, make_config):
        source = write_source({
            "siFoo bar": {"title": "Foo Bar", "path": "M0 0"},
            "siFoo  bar": {"title": "Foo  Bar", "path": "M1 1"},
        })
        config = make_config(source)
        with pytest.raises(IdentifierCollisionError):
            run_generation(config)
        assert not config.output_dir.exists()
        assert not config.manifest_path.exists()

    def test_order_follows_source(self, write_source, make_config):
        source = write_source({
            "siZulip": {"title": "Zulip", "path": "M0 0"},
            "siAirbnb": {"title": "Airbnb", "path": "M1 1"},
        })
        result = run_generation(make_config(source))
        assert result.identifiers == ["SiZulip", "SiAirbnb"]
