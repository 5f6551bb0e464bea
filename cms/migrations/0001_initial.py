# Initial schema for imported flat-file content

from django.db import migrations, models
import django.core.serializers.json
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Entry',
            fields=[
                ('id', models.CharField(max_length=64, primary_key=True, serialize=False)),
                ('site', models.CharField(max_length=50)),
                ('collection', models.CharField(max_length=100)),
                ('slug', models.CharField(blank=True, max_length=255)),
                ('blueprint', models.CharField(blank=True, max_length=100, null=True)),
                ('origin_id', models.CharField(blank=True, db_index=True, max_length=64, null=True)),
                ('published', models.BooleanField(default=True)),
                ('date', models.DateTimeField(blank=True, null=True)),
                ('order', models.IntegerField(blank=True, null=True)),
                ('data', models.JSONField(blank=True, default=dict, encoder=django.core.serializers.json.DjangoJSONEncoder)),
                ('created_at', models.DateTimeField(blank=True, null=True)),
                ('updated_at', models.DateTimeField(blank=True, null=True)),
            ],
            options={
                'verbose_name_plural': 'Entries',
                'db_table': 'cms_entries',
                'indexes': [
                    models.Index(fields=['collection'], name='cms_entries_collection_idx'),
                    models.Index(fields=['site'], name='cms_entries_site_idx'),
                    models.Index(fields=['collection', 'slug'], name='cms_entries_coll_slug_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Blueprint',
            fields=[
                ('id', models.AutoField(primary_key=True, serialize=False)),
                ('namespace', models.CharField(blank=True, max_length=200, null=True)),
                ('handle', models.CharField(max_length=200)),
                ('hidden', models.BooleanField(default=False)),
                ('order', models.IntegerField(blank=True, null=True)),
                ('data', models.JSONField(blank=True, default=dict, encoder=django.core.serializers.json.DjangoJSONEncoder)),
                ('created_at', models.DateTimeField(blank=True, null=True)),
                ('updated_at', models.DateTimeField(blank=True, null=True)),
            ],
            options={
                'db_table': 'cms_blueprints',
                'indexes': [
                    models.Index(fields=['handle'], name='cms_blueprints_handle_idx'),
                ],
                'unique_together': {('namespace', 'handle')},
            },
        ),
        migrations.CreateModel(
            name='Fieldset',
            fields=[
                ('id', models.AutoField(primary_key=True, serialize=False)),
                ('handle', models.CharField(max_length=200, unique=True)),
                ('data', models.JSONField(blank=True, default=dict, encoder=django.core.serializers.json.DjangoJSONEncoder)),
                ('created_at', models.DateTimeField(blank=True, null=True)),
                ('updated_at', models.DateTimeField(blank=True, null=True)),
            ],
            options={
                'db_table': 'cms_fieldsets',
            },
        ),
        migrations.CreateModel(
            name='Navigation',
            fields=[
                ('id', models.AutoField(primary_key=True, serialize=False)),
                ('handle', models.CharField(max_length=100, unique=True)),
                ('title', models.CharField(blank=True, max_length=255)),
                ('data', models.JSONField(blank=True, default=dict, encoder=django.core.serializers.json.DjangoJSONEncoder)),
                ('created_at', models.DateTimeField(blank=True, null=True)),
                ('updated_at', models.DateTimeField(blank=True, null=True)),
            ],
            options={
                'db_table': 'cms_navigations',
            },
        ),
        migrations.CreateModel(
            name='NavTree',
            fields=[
                ('id', models.AutoField(primary_key=True, serialize=False)),
                ('site', models.CharField(max_length=50)),
                ('tree', models.JSONField(blank=True, default=list, encoder=django.core.serializers.json.DjangoJSONEncoder)),
                ('settings', models.JSONField(blank=True, default=dict, encoder=django.core.serializers.json.DjangoJSONEncoder)),
                ('created_at', models.DateTimeField(blank=True, null=True)),
                ('updated_at', models.DateTimeField(blank=True, null=True)),
                ('navigation', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='trees', to='cms.navigation')),
            ],
            options={
                'db_table': 'cms_nav_trees',
                'indexes': [
                    models.Index(fields=['site'], name='cms_nav_trees_site_idx'),
                ],
                'unique_together': {('navigation', 'site')},
            },
        ),
    ]
