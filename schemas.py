"""Pydantic schemas for the Baidu OCR response and normalized results."""


from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

class OcrRect(BaseModel):
	"""Bounding rectangle as reported by the service; every field is a numeric string."""
	height: str
	left: str
	top: str
	width: str

class OcrWord(BaseModel):
	"""A single recognized fragment with its rectangle."""
	word: str
	rect: OcrRect

class OcrResponse(BaseModel):
	"""Wire shape of the JSON body returned by the service."""
	model_config = ConfigDict(populate_by_name=True)

	err_msg: str = Field(default="", alias="errMsg")
	ret_data: list[OcrWord] = Field(default_factory=list, alias="retData")

	@field_validator("err_msg", "ret_data", mode="before")
	@classmethod
	def null_as_empty(cls, value, info: ValidationInfo):
		"""The service sends ``null`` for absent values; treat it as empty."""
		if value is None:
			return "" if info.field_name == "err_msg" else []
		return value

	def to_wire(self) -> dict:
		"""Serialize back to the service's field names."""
		return self.model_dump(by_alias=True)

class OcrResult(BaseModel):
	"""Normalized OCR output for console display and persistence."""
	backend: str = "baidu"
	language_type: str
	image_path: str | None = None
	words: list[OcrWord]
	fragments: list[str]
	full_text: str
	raw: dict
