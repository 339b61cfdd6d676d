import json
import os
import tempfile
import unittest
from unittest import mock

from config import GlobalConfig
from config_manager import load_project_config
from errors import ConfigError


class ProjectConfigTestCase(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.repo_root = self._tmp.name

    def tearDown(self):
        self._tmp.cleanup()

    def write_config(self, text: str):
        with open(os.path.join(self.repo_root, ".commitblog.json"), "w", encoding="utf-8") as f:
            f.write(text)


class TestLoadProjectConfig(ProjectConfigTestCase):

    def test_defaults_without_override_file(self):
        config = load_project_config(self.repo_root)
        self.assertEqual(config.model, "anthropic/claude-sonnet-4-20250514")
        self.assertEqual(config.output_dir, "blogs")
        self.assertEqual(
            config.skip_patterns, ("^Merge ", "^WIP", "^fixup!", "^chore:")
        )

    def test_shallow_merge_keeps_omitted_defaults(self):
        self.write_config(json.dumps({"model": "openai/gpt-4o", "extra": True}))
        config = load_project_config(self.repo_root)
        self.assertEqual(config.model, "openai/gpt-4o")
        self.assertEqual(config.output_dir, "blogs")
        self.assertEqual(len(config.skip_patterns), 4)

    def test_skip_patterns_replaced_not_appended(self):
        self.write_config(json.dumps({"skipPatterns": ["^docs:"], "outputDir": "posts"}))
        config = load_project_config(self.repo_root)
        self.assertEqual(config.skip_patterns, ("^docs:",))
        self.assertEqual(config.output_dir, "posts")

    def test_malformed_json_is_fatal(self):
        self.write_config('{"model": "openai/gpt-4o",')
        with self.assertRaises(ConfigError) as cm:
            load_project_config(self.repo_root)
        self.assertFalse(cm.exception.recoverable)

    def test_non_object_rejected(self):
        self.write_config("[]")
        with self.assertRaises(ConfigError):
            load_project_config(self.repo_root)

    def test_wrong_types_rejected(self):
        for payload in ({"skipPatterns": "^WIP"}, {"model": 42}, {"outputDir": ""}):
            with self.subTest(payload=payload):
                self.write_config(json.dumps(payload))
                with self.assertRaises(ConfigError):
                    load_project_config(self.repo_root)

    def test_invalid_regex_rejected(self):
        self.write_config(json.dumps({"skipPatterns": ["(unclosed"]}))
        with self.assertRaises(ConfigError):
            load_project_config(self.repo_root)


class TestGlobalConfig(ProjectConfigTestCase):

    def test_env_file_overrides_environment(self):
        with open(os.path.join(self.repo_root, ".env"), "w", encoding="utf-8") as f:
            f.write("OPENAI_API_KEY=first\nOPENAI_API_KEY=second\n")

        with mock.patch.dict(os.environ, {"OPENAI_API_KEY": "from-shell"}):
            config = GlobalConfig.load(self.repo_root)

        self.assertEqual(config.get_api_key("OPENAI_API_KEY"), "second")
        self.assertTrue(config.is_secret_configured("OPENAI_API_KEY"))

    def test_missing_env_file_uses_environment(self):
        with mock.patch.dict(
            os.environ, {"GROQ_API_KEY": "gsk", "ANTHROPIC_API_KEY": ""}
        ):
            config = GlobalConfig.load(self.repo_root)

        self.assertEqual(config.get_api_key("GROQ_API_KEY"), "gsk")
        self.assertFalse(config.is_secret_configured("ANTHROPIC_API_KEY"))

    def test_undecodable_env_file_is_config_error(self):
        with open(os.path.join(self.repo_root, ".env"), "wb") as f:
            f.write(b"OPENAI_API_KEY=\xff\xfe\n")

        with mock.patch.dict(os.environ, {}):
            with self.assertRaises(ConfigError) as cm:
                GlobalConfig.load(self.repo_root)
        self.assertIn(".env", str(cm.exception))
        self.assertFalse(cm.exception.recoverable)

    def test_paths(self):
        config = GlobalConfig(self.repo_root)
        self.assertEqual(config.env_path, os.path.join(self.repo_root, ".env"))
        self.assertEqual(
            config.progress_log_path,
            os.path.join(self.repo_root, ".commitblog", "last-run.log"),
        )


if __name__ == "__main__":
    unittest.main()
