"""CDK Stack Tests"""
import pytest

cdk = pytest.importorskip("aws_cdk")
from aws_cdk.assertions import Template  # noqa: E402

from infra.stacks.data_stack import DataStack  # noqa: E402
from infra.stacks.name_registry_stack import NameRegistryStack  # noqa: E402


class TestDataStack:
    """DataStack のテスト"""

    def test_names_table(self):
        """正常: Id をパーティションキーとするオンデマンドテーブル"""
        # Arrange
        app = cdk.App()
        stack = NameRegistryStack(app, "TestStack", table_name="TestNames")
        data_stack = next(c for c in stack.node.children if isinstance(c, DataStack))

        # Act
        template = Template.from_stack(data_stack)

        # Assert
        template.resource_count_is("AWS::DynamoDB::Table", 1)
        template.has_resource_properties(
            "AWS::DynamoDB::Table",
            {
                "TableName": "TestNames",
                "KeySchema": [{"AttributeName": "Id", "KeyType": "HASH"}],
                "BillingMode": "PAY_PER_REQUEST",
            },
        )
