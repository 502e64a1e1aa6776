import unittest

import dropboxfs


class TestPublicApi(unittest.TestCase):
    def test_top_level_exports_exist(self) -> None:
        self.assertTrue(hasattr(dropboxfs, "Client"))
        self.assertTrue(hasattr(dropboxfs, "Config"))
        self.assertTrue(hasattr(dropboxfs, "File"))
        self.assertTrue(hasattr(dropboxfs, "FileInfo"))
        self.assertTrue(hasattr(dropboxfs, "Metadata"))
        self.assertTrue(hasattr(dropboxfs, "WriteMode"))

        self.assertTrue(hasattr(dropboxfs, "DropboxFSError"))
        self.assertTrue(hasattr(dropboxfs, "ApiError"))
        self.assertTrue(hasattr(dropboxfs, "InvalidStateError"))

    def test___all___is_defined(self) -> None:
        self.assertTrue(hasattr(dropboxfs, "__all__"))
        self.assertIn("Client", dropboxfs.__all__)
        self.assertIn("ApiError", dropboxfs.__all__)
        for name in dropboxfs.__all__:
            self.assertTrue(hasattr(dropboxfs, name), name)


if __name__ == "__main__":
    unittest.main()
