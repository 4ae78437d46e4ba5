"""GraphQL documents for the ShipHero product operations.

Every product operation selects the same field set.
"""

PRODUCT_FIELDS = """
    id
    sku
    name
    description
    price
    weight
    dimensions {
      length
      width
      height
    }
    category
    brand
    images
    tags
    isActive
    createdAt
    updatedAt
"""

PRODUCTS_QUERY = f"""
query GetProducts {{
  products {{{PRODUCT_FIELDS}  }}
}}
"""

PRODUCT_QUERY = f"""
query GetProduct($id: ID!) {{
  product(id: $id) {{{PRODUCT_FIELDS}  }}
}}
"""

PRODUCT_BY_SKU_QUERY = f"""
query GetProductBySku($sku: String!) {{
  productBySku(sku: $sku) {{{PRODUCT_FIELDS}  }}
}}
"""

CREATE_PRODUCT_MUTATION = f"""
mutation CreateProduct($input: CreateProductInput!) {{
  createProduct(input: $input) {{{PRODUCT_FIELDS}  }}
}}
"""

UPDATE_PRODUCT_MUTATION = f"""
mutation UpdateProduct($id: ID!, $input: UpdateProductInput!) {{
  updateProduct(id: $id, input: $input) {{{PRODUCT_FIELDS}  }}
}}
"""

DELETE_PRODUCT_MUTATION = """
mutation DeleteProduct($id: ID!) {
  deleteProduct(id: $id) {
    success
    message
  }
}
"""
