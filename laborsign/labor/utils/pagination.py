# -*- coding: utf-8 -*-
from rest_framework.pagination import PageNumberPagination


class ContractPagination(PageNumberPagination):
    # dashboard cards are loaded in small pages
    page_size = 10
    page_size_query_param = "page_size"
    max_page_size = 100
