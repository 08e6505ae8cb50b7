"""Raw query responses, as returned by `/cms/content/query`."""

PAGE_SCHEMA = (
    "https://raw.githubusercontent.com/techiedarren/dc-examples/master/content-types/containers/page.json"
)
IMAGE_BLOCK_SCHEMA = (
    "https://raw.githubusercontent.com/techiedarren/dc-examples/master/content-types/blocks/image-block.json"
)
ASPECT_RATIO_SCHEMA = (
    "https://raw.githubusercontent.com/techiedarren/dc-examples/master/content-types/mixins/aspect-ratio.json"
)
IMAGE_LINK_SCHEMA = "http://bigcontent.io/cms/schema/v1/core#/definitions/image-link"
CONTENT_LINK_SCHEMA = "http://bigcontent.io/cms/schema/v1/core#/definitions/content-link"

ITEM_ID = "2c7efa09-7e31-4503-8d00-5a150ff82f17"
ITEM_IRI = f"http://content.cms.amplience.com/{ITEM_ID}"
BLOCK_ID = "286f3e8e-f088-4956-92c6-a196d7e16c4e"
BLOCK_IRI = f"http://content.cms.amplience.com/{BLOCK_ID}"
IMAGE_ID = "ddf4eac9-7822-401c-97d6-b1be985e421c"
IMAGE_IRI = f"http://image.cms.amplience.com/{IMAGE_ID}"

BASE = "http://dcdemo.a.bigcontent.io/"

IMAGE_FIELDS = {
    "id": IMAGE_ID,
    "name": "shutterstock_749703970",
    "endpoint": "dcdemo",
    "defaultHost": "i1.adis.ws",
    "mediaType": "image",
}

CURRENT_IMAGE = {"@id": IMAGE_IRI, "_meta": {"schema": IMAGE_LINK_SCHEMA}, **IMAGE_FIELDS}
LEGACY_IMAGE = {"@id": IMAGE_IRI, "@type": IMAGE_LINK_SCHEMA, **IMAGE_FIELDS}

RESOLVED_IMAGE = {"_meta": {"schema": IMAGE_LINK_SCHEMA}, **IMAGE_FIELDS}

NO_RESULTS = {"@base": BASE, "@graph": [], "results": []}

SINGLE_RESULT = {
    "@base": BASE,
    "@graph": [
        {
            "@id": ITEM_IRI,
            "_meta": {"schema": PAGE_SCHEMA, "name": "name", "deliveryId": ITEM_ID},
        }
    ],
    "results": [{"@id": ITEM_IRI}],
}

SINGLE_LEGACY_RESULT = {
    "@base": BASE,
    "@graph": [{"@id": ITEM_IRI, "@type": PAGE_SCHEMA, "_title": "Title"}],
    "results": [{"@id": ITEM_IRI}],
}

SINGLE_RESULT_WITH_IMAGE = {
    "@base": BASE,
    "@graph": [
        {
            "@id": ITEM_IRI,
            "_meta": {"schema": PAGE_SCHEMA, "deliveryId": ITEM_ID},
            "image": {"@id": IMAGE_IRI},
        },
        CURRENT_IMAGE,
    ],
    "results": [{"@id": ITEM_IRI}],
}

SINGLE_LEGACY_RESULT_WITH_IMAGE = {
    "@base": BASE,
    "@graph": [
        {"@id": ITEM_IRI, "@type": PAGE_SCHEMA, "image": {"@id": IMAGE_IRI}},
        LEGACY_IMAGE,
    ],
    "results": [{"@id": ITEM_IRI}],
}

NESTED_CONTENT = {
    "@base": BASE,
    "@graph": [
        {
            "@id": ITEM_IRI,
            "_meta": {"schema": PAGE_SCHEMA, "deliveryId": ITEM_ID},
            "contentSlots": [
                {
                    "_meta": {"schema": CONTENT_LINK_SCHEMA},
                    "contentType": IMAGE_BLOCK_SCHEMA,
                    "id": BLOCK_ID,
                }
            ],
        },
        {
            "@id": BLOCK_IRI,
            "_meta": {
                "schema": IMAGE_BLOCK_SCHEMA,
                "name": "fathers-day-pre-sale",
                "deliveryId": BLOCK_ID,
            },
            "image": {"@id": IMAGE_IRI},
            "mobileAspectRatio": {"@type": ASPECT_RATIO_SCHEMA, "w": 1, "h": 1},
            "aspectRatio": {"_meta": {"schema": ASPECT_RATIO_SCHEMA}, "w": 5, "h": 2},
        },
        LEGACY_IMAGE,
    ],
    "results": [{"@id": ITEM_IRI}],
}

NESTED_CONTENT_EXPECTED = {
    "_meta": {"deliveryId": ITEM_ID, "schema": PAGE_SCHEMA},
    "contentSlots": [
        {
            "_meta": {
                "deliveryId": BLOCK_ID,
                "schema": IMAGE_BLOCK_SCHEMA,
                "name": "fathers-day-pre-sale",
            },
            "image": RESOLVED_IMAGE,
            "mobileAspectRatio": {"w": 1, "h": 1, "_meta": {"schema": ASPECT_RATIO_SCHEMA}},
            "aspectRatio": {"w": 5, "h": 2, "_meta": {"schema": ASPECT_RATIO_SCHEMA}},
        }
    ],
}
