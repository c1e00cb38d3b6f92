class UploadError(Exception):
    def __init__(self, filename: str):
        self.filename = filename
        super().__init__(f"Failed to upload file {filename}")
