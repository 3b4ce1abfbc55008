#################################
# --- File metadata schemas --- #
#################################

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
)

RESULT_OK = "OK"
DOWNLOAD_PATH = "d?id="
HOTLINK_PATH = "hotlink/"


class File(BaseModel):
    """Metadata of an uploaded file."""
    id: str = Field("", alias="Id", description="The id of the file.")
    name: str = Field("", alias="Name", description="The original file name.")
    size: str = Field(
        "",
        alias="Size",
        description="The size of the file, already formatted for display.",
        json_schema_extra={"example": "10 B"},
    )
    sha256: str = Field("", alias="SHA256")
    expire_at: int = Field(0, alias="ExpireAt", description="Expiry as unix timestamp.")
    expire_at_string: str = Field("", alias="ExpireAtString")
    downloads_remaining: int = Field(0, alias="DownloadsRemaining")
    password_hash: str = Field("", alias="PasswordHash")
    hotlink_id: str = Field("", alias="HotlinkId")
    content_type: str = Field("", alias="ContentType")
    aws_bucket: str = Field("", alias="AwsBucket", description="Empty if stored locally.")

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "Id": "testId",
                "Name": "testName",
                "Size": "10 B",
                "SHA256": "sha256",
                "ExpireAt": 50,
                "ExpireAtString": "future",
                "DownloadsRemaining": 1,
                "PasswordHash": "pwhash",
                "HotlinkId": "hotlinkid",
                "ContentType": "text/html",
                "AwsBucket": "",
            }
        }
    )

    def to_json_result(self, server_url: str) -> str:
        """Returns the file info as a JSON result document."""
        return to_json_result(self, server_url)


class FileApiOutput(BaseModel):
    """Result envelope returned for a single file's metadata."""
    result: str = Field(RESULT_OK, alias="Result")
    file_info: File = Field(alias="FileInfo")
    url: str = Field(alias="Url")
    hotlink_url: str = Field(alias="HotlinkUrl")

    model_config = ConfigDict(populate_by_name=True)


def to_json_result(file: File, server_url: str) -> str:
    """
    Serialize a file's metadata into the result envelope.

    Url and HotlinkUrl are prefixes only; the client appends the id or
    hotlink id itself.
    """
    output = FileApiOutput(
        file_info=file,
        url=server_url + DOWNLOAD_PATH,
        hotlink_url=server_url + HOTLINK_PATH,
    )
    return output.model_dump_json(by_alias=True)
