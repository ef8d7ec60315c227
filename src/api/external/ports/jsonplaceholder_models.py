"""Schema of the third-party user resource (JSONPlaceholder `/users`).

Missing string fields default to empty strings, matching how the resource
has always been decoded; only the numeric id is required.
"""

from pydantic import BaseModel, ConfigDict, Field, StrictInt


class JsonPlaceholderGeo(BaseModel):
    lat: str = ""
    lng: str = ""


class JsonPlaceholderAddress(BaseModel):
    street: str = ""
    suite: str = ""
    city: str = ""
    zipcode: str = ""
    geo: JsonPlaceholderGeo = Field(default_factory=JsonPlaceholderGeo)


class JsonPlaceholderCompany(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    catch_phrase: str = Field(default="", alias="catchPhrase")
    bs: str = ""


class JsonPlaceholderUser(BaseModel):
    id: StrictInt
    name: str = ""
    username: str = ""
    email: str = ""
    phone: str = ""
    website: str = ""
    address: JsonPlaceholderAddress = Field(default_factory=JsonPlaceholderAddress)
    company: JsonPlaceholderCompany = Field(default_factory=JsonPlaceholderCompany)
