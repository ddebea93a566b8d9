import json

from django.conf import settings
from django.core.paginator import EmptyPage, Paginator
from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response


class PagedList(list):
    """
    One page of results plus the metadata needed to describe it.

    Pages past the end are empty rather than an error, and the totals are
    still reported.
    """

    def __init__(self, items, paginator: Paginator, page_number: int):
        super().__init__(items)
        self.current_page = page_number
        self.page_size = paginator.per_page
        self.total_count = paginator.count
        self.total_pages = paginator.num_pages

    @classmethod
    def create(cls, source, page_number: int, page_size: int) -> 'PagedList':
        # No empty first page, so an empty source reports zero pages
        paginator = Paginator(source, page_size, allow_empty_first_page=False)
        try:
            items = paginator.page(page_number).object_list
        except EmptyPage:
            items = []
        return cls(items, paginator, page_number)


class MemberPagination(PageNumberPagination):
    """Page size limits for the member listing; metadata goes in a header, not the body."""
    page_query_param = 'page_number'
    page_size_query_param = 'page_size'
    page_size = settings.MEMBERS_CONFIG['DEFAULT_PAGE_SIZE']
    max_page_size = settings.MEMBERS_CONFIG['MAX_PAGE_SIZE']

    def get_paginated_response(self, data):
        response = Response(list(data))
        return add_pagination_header(
            response,
            data.current_page,
            data.page_size,
            data.total_count,
            data.total_pages,
        )


def add_pagination_header(response, current_page: int, items_per_page: int,
                          total_items: int, total_pages: int):
    header = {
        "currentPage": current_page,
        "itemsPerPage": items_per_page,
        "totalItems": total_items,
        "totalPages": total_pages,
    }
    response["Pagination"] = json.dumps(header)
    response["Access-Control-Expose-Headers"] = "Pagination"
    return response
