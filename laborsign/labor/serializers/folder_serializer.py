from rest_framework import serializers
from labor.models import ContractFolder


class FolderReadSerializer(serializers.ModelSerializer):
    contract_count = serializers.SerializerMethodField()

    class Meta:
        model = ContractFolder
        fields = ["id", "owner_id", "name", "color", "contract_count", "created_at"]
        read_only_fields = fields

    def get_contract_count(self, obj) -> int:
        # only completed contracts are shown inside a folder
        return obj.contracts.filter(status="completed").count()


class FolderCreateSerializer(serializers.Serializer):
    owner_id = serializers.IntegerField()
    name = serializers.CharField(max_length=60)
    color = serializers.ChoiceField(choices=ContractFolder.Color.choices, required=False, default=ContractFolder.Color.GRAY)


class FolderUpdateSerializer(serializers.Serializer):
    owner_id = serializers.IntegerField(required=False)
    name = serializers.CharField(max_length=60, required=False)
    color = serializers.ChoiceField(choices=ContractFolder.Color.choices, required=False)


class FolderDeleteResultSerializer(serializers.Serializer):
    deleted_folder_id = serializers.IntegerField()
    detached = serializers.IntegerField()
    current_folder_id = serializers.IntegerField(allow_null=True)
