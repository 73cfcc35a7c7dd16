import contextlib
import io
import unittest

from vector3d.__main__ import main


class DemoTests(unittest.TestCase):
    def test_default_vector(self) -> None:
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            code = main([])
        self.assertEqual(code, 0)
        text = out.getvalue()
        self.assertIn("Vector: Vector3D(2.0, 3.0, 4.0)", text)
        self.assertIn("Magnitude: 5.38516", text)
        self.assertIn("Precise normalize:", text)
        self.assertIn("Fast normalize:", text)

    def test_custom_vector(self) -> None:
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            main(["0", "0", "5"])
        self.assertIn("Precise normalize: Vector3D(0.0, 0.0, 1.0)", out.getvalue())


if __name__ == "__main__":
    unittest.main()
