import pathlib
import unittest

import specfun

_PACKAGE_DIR = pathlib.Path(specfun.__file__).parent


class TestLicenseHeaders(unittest.TestCase):
  def test_public_modules_carry_header(self):
    for name in ['__init__.py', '_errors.py', 'constants.py', 'special.py']:
      with self.subTest(name=name):
        head = (_PACKAGE_DIR / name).read_text(encoding='utf-8').splitlines()[:3]
        self.assertIn('# Copyright 2025 specfun Team. All Rights Reserved.', head)

  def test_copyright_owner(self):
    for path in _PACKAGE_DIR.rglob('*.py'):
      for line in path.read_text(encoding='utf-8').splitlines()[:5]:
        if line.startswith('# Copyright'):
          with self.subTest(path=str(path)):
            self.assertIn('specfun Team', line)


if __name__ == '__main__':
  unittest.main()
