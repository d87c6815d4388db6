import logging
import os
import subprocess
import sys
import unittest
from unittest.mock import patch

import main


class TestMain(unittest.TestCase):
    def test_parse_args_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            args = main.parse_args([])
        self.assertEqual("$ ", args.prompt)
        self.assertFalse(args.debug)

    def test_parse_args_prompt_and_debug(self):
        args = main.parse_args(["--prompt", "% ", "--debug"])
        self.assertEqual("% ", args.prompt)
        self.assertTrue(args.debug)

    def test_debug_from_environment(self):
        with patch.dict(os.environ, {"PYSH_DEBUG": "1"}):
            self.assertTrue(main.parse_args([]).debug)

    @patch.object(main.logging, "basicConfig")
    def test_setup_logging_level(self, mock_config):
        main.setup_logging(True)
        self.assertEqual(logging.DEBUG, mock_config.call_args.kwargs["level"])
        main.setup_logging(False)
        self.assertEqual(logging.WARNING, mock_config.call_args.kwargs["level"])

    def test_main_exits_with_shell_status(self):
        with patch.object(main, "setup_logging"), \
             patch.object(main, "Shell") as mock_shell:
            mock_shell.return_value.run.return_value = 3
            with self.assertRaises(SystemExit) as cm:
                main.main(["--prompt", "> "])

        self.assertEqual(3, cm.exception.code)
        mock_shell.assert_called_once_with(prompt="> ")

    def test_end_of_input_exits_with_one(self):
        completed = subprocess.run(
            [sys.executable, main.__file__],
            input=b"echo hi\n",
            capture_output=True,
        )
        self.assertEqual(1, completed.returncode)
        self.assertIn(b"hi\n", completed.stdout)
        self.assertIn(b"Error reading input: EOF", completed.stderr)


if __name__ == "__main__":
    unittest.main()
