"""Query builders, one module per Elasticsearch query type."""